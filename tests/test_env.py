"""Tests for blinkin_table.core.env — .env loading and settings."""

import os
from pathlib import Path

import pytest
from blinkin_table.core.env import Settings, _find_dotenv, _parse_dotenv, load_env


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('KEY="hello world"\nKEY2=\'single\'\n')
        assert _parse_dotenv(f) == {'KEY': 'hello world', 'KEY2': 'single'}

    def test_comments_and_blank_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_line_without_equals_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv.resolve()

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').mkdir()
        subdir = repo / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        assert _find_dotenv(repo) is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('TEST_BLINKIN_KEY', raising=False)
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('TEST_BLINKIN_KEY=secret\n')
        monkeypatch.chdir(tmp_path)
        try:
            assert load_env() == (tmp_path / '.env').resolve()
            assert os.environ.get('TEST_BLINKIN_KEY') == 'secret'
        finally:
            os.environ.pop('TEST_BLINKIN_KEY', None)

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_BLINKIN_KEY2', 'original')
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('TEST_BLINKIN_KEY2=fromfile\n')
        load_env(env_file=str(dotenv))
        assert os.environ.get('TEST_BLINKIN_KEY2') == 'original'

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('BLINKIN_MAX_DUTY', raising=False)
        monkeypatch.delenv('BLINKIN_SWATCH_CELL', raising=False)
        assert Settings.from_env() == Settings(max_duty=255, swatch_cell=96)

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('BLINKIN_MAX_DUTY', '65535')
        monkeypatch.setenv('BLINKIN_SWATCH_CELL', '40')
        assert Settings.from_env() == Settings(max_duty=65535, swatch_cell=40)

    def test_non_integer_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('BLINKIN_MAX_DUTY', 'lots')
        with pytest.raises(ValueError, match='BLINKIN_MAX_DUTY'):
            Settings.from_env()

    def test_non_positive_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('BLINKIN_SWATCH_CELL', '0')
        with pytest.raises(ValueError, match='BLINKIN_SWATCH_CELL'):
            Settings.from_env()
