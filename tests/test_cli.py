"""Tests for the blinkin-table command line and command registry."""

import json
import os
from pathlib import Path

import pytest
from blinkin_table.__main__ import main
from blinkin_table.core.types import Command, NotFound
from blinkin_table.registry import all_commands, get
from PIL import Image


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    # no .env lookups outside the test directory, default settings
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('BLINKIN_MAX_DUTY', raising=False)
    monkeypatch.delenv('BLINKIN_SWATCH_CELL', raising=False)


def _json(capsys: pytest.CaptureFixture, *argv: str) -> dict:
    main(['--json', *argv])
    return json.loads(capsys.readouterr().out)


class TestRegistry:
    def test_discovers_all_commands(self):
        assert set(all_commands()) == {'duty', 'list', 'name', 'nearest', 'swatch', 'value'}

    def test_get(self):
        assert isinstance(get('value'), Command)

    def test_unknown_command(self):
        with pytest.raises(NotFound, match='Unknown command'):
            get('paint')


class TestList:
    def test_all(self, capsys):
        obj = _json(capsys, 'list')
        assert obj['summary']['count'] == 100
        assert obj['rows'][0]['name'] == 'rainbow'
        assert obj['rows'][-1] == {
            'name': 'black',
            'value': 0.99,
            'code': 199,
            'category': 'solid',
            'description': 'Black',
        }

    def test_category(self, capsys):
        obj = _json(capsys, 'list', '--category', 'color-2')
        assert obj['summary']['count'] == 10
        assert all(r['category'] == 'color-2' for r in obj['rows'])

    def test_text_output(self, capsys):
        main(['list', '-c', 'solid'])
        out = capsys.readouterr().out
        assert 'hot-pink' in out
        assert out.rstrip().endswith('count: 22')


class TestValue:
    def test_red(self, capsys):
        obj = _json(capsys, 'value', 'red')
        assert obj['summary']['value'] == 0.61
        assert obj['summary']['code'] == 161
        assert obj['summary']['pulse_us'] == 1805

    def test_unknown_label_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['value', 'solid-ultraviolet'])
        assert exc.value.code == 1
        assert "Unknown pattern: 'solid-ultraviolet'" in capsys.readouterr().err


class TestName:
    def test_reverse(self, capsys):
        assert _json(capsys, 'name', '0.61')['summary']['name'] == 'red'

    def test_negative_value(self, capsys):
        assert _json(capsys, 'name', '-0.59')['summary']['name'] == 'fire-medium'

    def test_unknown_value_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['name', '0.6'])
        assert exc.value.code == 1
        assert 'No pattern has value 0.6' in capsys.readouterr().err


class TestDuty:
    def test_default_max_duty(self, capsys):
        obj = _json(capsys, 'duty', 'color1-larson')
        assert obj['summary'] == {'name': 'color1-larson', 'max_duty': 255, 'duty': 126}

    def test_explicit_max_duty(self, capsys):
        assert _json(capsys, 'duty', 'color1-larson', '--max-duty', '1000')['summary']['duty'] == 495

    def test_max_duty_from_env(self, capsys, monkeypatch):
        monkeypatch.setenv('BLINKIN_MAX_DUTY', '1000')
        assert _json(capsys, 'duty', 'color1-larson')['summary']['max_duty'] == 1000

    def test_max_duty_from_dotenv(self, capsys, tmp_path):
        (tmp_path / 'blinkin.env').write_text('BLINKIN_MAX_DUTY=1000\n')
        try:
            obj = _json(capsys, '--env-file', str(tmp_path / 'blinkin.env'), 'duty', 'red')
        finally:
            os.environ.pop('BLINKIN_MAX_DUTY', None)
        assert obj['summary']['max_duty'] == 1000

    def test_zero_max_duty_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['duty', 'red', '--max-duty', '0'])
        assert exc.value.code == 1


class TestNearest:
    def test_orange(self, capsys):
        obj = _json(capsys, 'nearest', '#ffa600')
        assert obj['summary']['name'] == 'orange'
        assert obj['summary']['value'] == 0.65

    def test_threshold_no_match(self, capsys):
        obj = _json(capsys, 'nearest', '#800180', '--threshold', '5')
        assert obj['summary']['name'] is None

    def test_bad_hex_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['nearest', 'orange'])
        assert exc.value.code == 1
        assert 'Not a hex colour' in capsys.readouterr().err


class TestSwatch:
    def test_writes_png(self, capsys, tmp_path):
        out = tmp_path / 'charts' / 'solid.png'
        obj = _json(capsys, 'swatch', str(out))
        assert obj['summary']['count'] == 22
        with Image.open(out) as image:
            assert image.size == (6 * 96, 4 * (96 + 28))
            # first cell is hot pink
            assert image.convert('RGB').getpixel((48, 48)) == (255, 105, 180)

    def test_unwritable_path_exits_1(self, capsys, tmp_path):
        (tmp_path / 'out.png').mkdir()
        with pytest.raises(SystemExit) as exc:
            main(['swatch', str(tmp_path / 'out.png')])
        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith('blinkin-table: error:')

    def test_unknown_extension_leaves_no_directories(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(['swatch', str(tmp_path / 'charts' / 'out.xyz')])
        assert exc.value.code == 1
        assert 'Unknown image extension' in capsys.readouterr().err
        assert not (tmp_path / 'charts').exists()

    def test_cell_size_from_env(self, capsys, tmp_path, monkeypatch):
        monkeypatch.setenv('BLINKIN_SWATCH_CELL', '20')
        obj = _json(capsys, 'swatch', str(tmp_path / 'small.png'))
        assert obj['summary']['width'] == 120


class TestHelp:
    def test_lists_commands(self, capsys):
        main(['help'])
        out = capsys.readouterr().out
        for name in ['duty', 'list', 'name', 'nearest', 'swatch', 'value']:
            assert name in out

    def test_command_docs(self, capsys):
        main(['help', 'value'])
        assert 'Look up the duty value for a pattern label.' in capsys.readouterr().out

    def test_unknown_topic_exits_1(self):
        with pytest.raises(SystemExit) as exc:
            main(['help', 'paint'])
        assert exc.value.code == 1

    def test_no_command_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
