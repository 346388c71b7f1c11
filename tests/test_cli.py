"""
Tests for CLI Commands
======================
Tests for the peres CLI interface in peres/cli.py.
"""

import pytest
import sys
import subprocess
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import peres.generators
from peres import __version__
from peres.cli import main, resolve_count
from peres.generators.phonemes import build_phonology


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(['--version'])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert 'generate' in capsys.readouterr().out

    def test_module_help(self):
        """Test python -m peres --help."""
        result = subprocess.run(
            [sys.executable, "-m", "peres", "--help"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "generate" in result.stdout.lower()
        assert "roots" in result.stdout.lower()


class TestResolveCount:
    """Tests for word count defaults."""

    def test_absent_uses_default(self):
        assert resolve_count(None) == 1

    def test_non_positive_becomes_one(self):
        assert resolve_count(0) == 1
        assert resolve_count(-4) == 1

    def test_positive_kept(self):
        assert resolve_count(7) == 7


class TestGenerateCommand:
    """Tests for `peres generate`."""

    def test_default_single_word(self, capsys):
        assert main(['generate']) == 0
        assert _lines(capsys) == ['stradush']

    def test_count(self, capsys):
        assert main(['generate', '2']) == 0
        assert _lines(capsys) == ['stradush', 'tavub']

    def test_alias(self, capsys):
        assert main(['g', '2']) == 0
        assert _lines(capsys) == ['stradush', 'tavub']

    def test_non_positive_count(self, capsys):
        assert main(['generate', '-3']) == 0
        assert len(_lines(capsys)) == 1

    def test_segmented_style(self, capsys):
        assert main(['generate', '--style', 'segmented']) == 0
        assert _lines(capsys) == ['str-a-d-u-sh']

    def test_seeds(self, capsys):
        main(['generate', '5', '--open-seed', '3', '--closed-seed', '4'])
        first = _lines(capsys)
        main(['generate', '5', '--open-seed', '3', '--closed-seed', '4'])
        assert _lines(capsys) == first
        assert len(first) == 5

    def test_rejected_marker(self, capsys, monkeypatch):
        repeating = build_phonology({
            'phonemes': {'a': ['short_vowel']},
            'onsets': [["", [], 1]],
            'nuclei': [['a', ['a'], 1]],
            'codas': [["", [], 1]],
        }, name='repeating')
        monkeypatch.setattr(peres.generators, 'load_phonology', lambda name='english': repeating)

        assert main(['generate', '2']) == 0
        assert _lines(capsys) == ['aa -> REJECTED', 'aa -> REJECTED']

    def test_exhausted_marker(self, capsys, monkeypatch):
        unsatisfiable = build_phonology({
            'phonemes': {
                's': ['fricative', 'voiceless', 'alveolar'],
                'p': ['plosive', 'voiceless', 'bilabial'],
                'a': ['short_vowel'],
            },
            'onsets': [['sp', ['s', 'p'], 1]],
            'nuclei': [['a', ['a'], 1]],
            'codas': [['p', ['p'], 1]],
        }, name='unsatisfiable')
        monkeypatch.setattr(peres.generators, 'load_phonology', lambda name='english': unsatisfiable)

        assert main(['generate', '2', '--max-attempts', '5']) == 0
        assert _lines(capsys) == ['(no word) -> EXHAUSTED', '(no word) -> EXHAUSTED']

    def test_stats(self, capsys):
        assert main(['generate', '2', '--stats']) == 0
        lines = _lines(capsys)
        assert lines[:2] == ['stradush', 'tavub']
        assert 'accepted 2' in lines[2]
        assert 'rejection ratio = 0.0%' in lines[2]

    def test_quiet_hides_stats_not_words(self, capsys):
        assert main(['--quiet', 'generate', '2', '--stats']) == 0
        assert _lines(capsys) == ['stradush', 'tavub']

    def test_verbose_table(self, capsys):
        assert main(['generate', '1', '--verbose']) == 0
        out = capsys.readouterr().out
        assert 'stradush' in out
        assert 'str-a-d-u-sh' in out
        assert 'accepted' in out

    def test_bad_pattern_is_error(self, capsys):
        assert main(['generate', '--pattern', 'open,heavy']) == 1
        assert 'Error:' in capsys.readouterr().err


class TestRootsCommand:
    """Tests for `peres roots`."""

    def test_pinned(self, capsys):
        assert main(['roots', '2']) == 0
        assert _lines(capsys) == ['*hr-oe', 'n*m-aa']

    def test_default_count(self, capsys):
        assert main(['r']) == 0
        assert len(_lines(capsys)) == 1
