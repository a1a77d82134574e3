"""Settings and .env loading for blinkin-table.

Settings come from environment variables. Before they are read, a .env file
may fill in variables the OS environment does not already define:
  1. OS environment variables always win and are never overwritten.
  2. The file given with --env-file, when provided.
  3. Otherwise the nearest .env walking up from cwd, stopping at .git.

Variables:
  BLINKIN_MAX_DUTY      default --max-duty for the duty command (255)
  BLINKIN_SWATCH_CELL   swatch cell size in pixels (96)
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MAX_DUTY = 255
DEFAULT_SWATCH_CELL = 96


def _find_dotenv(start: Path) -> Path | None:
    """Return the first .env in start or its parents, without leaving the repo."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a directory in a clone and a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Read KEY=value lines; quotes around values are dropped, comments and junk skipped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy unset variables from a .env file into os.environ.

    Returns the file that was loaded, or None.
    """
    path = Path(env_file) if env_file else _find_dotenv(Path.cwd())
    if path is None or not path.is_file():
        return None
    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {raw!r}') from None
    if value <= 0:
        raise ValueError(f'{name} must be positive, got {value}')
    return value


@dataclass(frozen=True)
class Settings:
    max_duty: int = DEFAULT_MAX_DUTY
    swatch_cell: int = DEFAULT_SWATCH_CELL

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            max_duty=_positive_int('BLINKIN_MAX_DUTY', DEFAULT_MAX_DUTY),
            swatch_cell=_positive_int('BLINKIN_SWATCH_CELL', DEFAULT_SWATCH_CELL),
        )
