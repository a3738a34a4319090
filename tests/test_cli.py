"""Tests for contrastlab.main: subcommand routing and exit codes."""

import json

import pytest

from contrastlab import __version__
from contrastlab.main import main


class TestInspector:
    def test_black(self, capsys):
        assert main(['-H', '000000']) == 0
        out = capsys.readouterr().out
        assert '#000000' in out
        assert '21.00:1' in out

    def test_missing_hex(self, capsys):
        assert main([]) == 2
        assert '-H/--hex' in capsys.readouterr().err

    def test_misplaced_command(self, capsys):
        assert main(['-H', '000000', 'palette']) == 2
        assert "must be the first argument" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['--version'])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_help_full_lists_subcommands(self, capsys):
        assert main(['--help-full']) == 0
        out = capsys.readouterr().out
        for name in ('contrast', 'adjust', 'convert', 'variant', 'palette'):
            assert f'contrastlab {name}' in out


class TestContrastCommand:
    def test_pass(self, capsys):
        assert main(['contrast', '-f', 'FFFFFF', '-b', '000000', '-l', 'AAA']) == 0
        assert 'pass' in capsys.readouterr().out

    def test_fail(self, capsys):
        assert main(['contrast', '-f', '#FF0000', '-b', '#00FF00', '-L']) == 1
        assert 'fail' in capsys.readouterr().err

    def test_invalid_hex_exits_2(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['contrast', '-f', 'zz', '-b', '000000'])
        assert exc.value.code == 2
        assert 'invalid hex value' in capsys.readouterr().err


class TestAdjustCommand:
    def test_lighten(self, capsys):
        assert main(['adjust', '-H', '777777', '--lighten', '0.2']) == 0
        assert '#aaaaaa' in capsys.readouterr().out

    def test_darken(self, capsys):
        assert main(['adjust', '-H', '777777', '--darken', '0.2']) == 0
        assert '#444444' in capsys.readouterr().out

    def test_requires_one_operation(self):
        with pytest.raises(SystemExit) as exc:
            main(['adjust', '-H', '777777'])
        assert exc.value.code == 2


class TestConvertCommand:
    def test_rgb(self, capsys):
        assert main(['convert', '-H', '#ff0000', '-t', 'rgb']) == 0
        assert capsys.readouterr().out.strip() == 'rgb(255, 0, 0)'

    def test_hsl(self, capsys):
        assert main(['convert', '-H', '00ff00']) == 0
        assert capsys.readouterr().out.strip() == 'hsl(120.00deg, 100.00%, 50.00%)'

    def test_hex_lowercases(self, capsys):
        assert main(['convert', '-H', 'ABCDEF', '-t', 'hex']) == 0
        assert capsys.readouterr().out.strip() == '#abcdef'


class TestVariantCommand:
    def test_found(self, capsys):
        assert main(['variant', '-H', '777777', '-d', 'darken']) == 0
        assert '#040404' in capsys.readouterr().out

    def test_not_found(self, capsys):
        assert main(['variant', '-H', '#ffffff', '-d', 'lighten']) == 1
        assert 'no accessible lighten variant found for #ffffff' in capsys.readouterr().err


class TestPaletteCommand:
    def test_json(self, capsys):
        assert main(['palette', '-H', '777777', '-j']) == 0
        captured = capsys.readouterr()
        assert json.loads(captured.out) == {
            'base': '#777777',
            'lighter': 'No accessible lighter variant found',
            'darker': '#040404',
        }
        assert 'warning' in captured.err

    def test_text(self, capsys):
        assert main(['palette', '-H', 'ffffff']) == 0
        out = capsys.readouterr().out
        assert '#737373' in out
        assert 'No accessible lighter variant found' in out
