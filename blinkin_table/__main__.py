"""blinkin-table — REV Blinkin LED driver colour table lookups.

Usage: blinkin-table [--env-file PATH] [--json] <command> [options]

Commands are auto-discovered from blinkin_table/commands/.
Each command module's docstring is its documentation.
Run `blinkin-table help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, blinkin-table looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from blinkin_table import registry
from blinkin_table.core.env import load_env
from blinkin_table.core.report import format_json, format_text
from blinkin_table.core.types import NotFound, Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'blinkin_table.commands.{name}')


def _short_doc(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  blinkin-table list --category solid\n'
        '  blinkin-table value red\n'
        '  blinkin-table name 0.61\n'
        '  blinkin-table duty color1-larson --max-duty 255\n'
        "  blinkin-table nearest '#ff8000'\n"
        '  blinkin-table swatch ./solid-colours.png\n'
        '  blinkin-table --json list\n'
        '  blinkin-table help value\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  BLINKIN_MAX_DUTY     default --max-duty for duty (255)\n'
        '  BLINKIN_SWATCH_CELL  swatch cell size in pixels (96)\n'
    )
    parser = argparse.ArgumentParser(
        prog='blinkin-table',
        description='Look up REV Blinkin LED driver patterns and their PWM duty values.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(registry.all_commands().items()):
        p = sub.add_parser(name, help=_short_doc(name, cmd.help), description=cmd.help)
        cmd.configure(p)

    # `help` subcommand prints the full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_doc(name, cmd.help)}')
        print('\nRun: blinkin-table help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    print(doc if doc else f'(No module docs for {topic!r})')


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'blinkin-table: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    report = Report(command=args.command)
    try:
        registry.get(args.command).execute(args, report)
    except (NotFound, ValueError, OSError) as e:
        print(f'blinkin-table: error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
