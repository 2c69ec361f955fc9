"""
Tests for CLI Commands
======================
Tests for the conlangkit CLI interface in conlangkit/cli.py.
"""

import csv
import io
import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from conlangkit.cli import main
from conlangkit.generators.syntax import INSUFFICIENT_VOCABULARY


def run_cli(*args):
    env = dict(os.environ, PYTHONIOENCODING='utf-8')
    return subprocess.run(
        [sys.executable, "-m", "conlangkit", *args],
        capture_output=True,
        text=True,
        encoding='utf-8',
        cwd=str(ROOT),
        env=env,
    )


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        """Test --version flag."""
        result = run_cli("--version")
        assert result.returncode == 0
        assert "conlangkit" in result.stdout.lower()

    def test_help_flag(self):
        """Test --help flag."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "generate" in result.stdout
        assert "romanize" in result.stdout

    def test_generate_help(self):
        """Test generate --help."""
        result = run_cli("generate", "--help")
        assert result.returncode == 0
        assert "--root-count" in result.stdout
        assert "--seed" in result.stdout

    def test_no_command(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()


class TestCLIGenerate:
    """Tests for generate command."""

    def test_json_export(self):
        result = run_cli("generate", "--preset", "japanese", "-n", "15", "--seed", "4", "--json")
        assert result.returncode == 0, result.stderr
        data = json.loads(result.stdout)
        assert 1 <= len(data['lexicon']) <= 15
        assert data['generated_grammar_details']['subject_marker'] == 'ga'

    def test_seed_reproducible(self):
        first = run_cli("generate", "-n", "10", "--seed", "9", "--json")
        second = run_cli("generate", "-n", "10", "--seed", "9", "--json")
        assert first.stdout == second.stdout

    def test_csv_to_directory(self, tmp_path, capsys):
        code = main(["generate", "-n", "8", "--seed", "2", "--csv", "-o", str(tmp_path)])
        assert code == 0
        rows = list(csv.reader(io.StringIO((tmp_path / "lexicon.csv").read_text(encoding='utf-8'))))
        assert rows[0] == ['ipa', 'roman', 'pos', 'meaning', 'gender']
        assert len(rows) >= 2

    def test_table_output(self):
        result = run_cli("generate", "--preset", "spanish", "-n", "12", "--seed", "1", "--summary")
        assert result.returncode == 0, result.stderr
        assert "Dictionary" in result.stdout
        assert "Typology" in result.stdout

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "lang.yaml"
        path.write_text(
            "preset: spanish\n"
            "lexicon: {semantic_fields: [body], root_count: 6}\n",
            encoding='utf-8',
        )
        assert main(["generate", "-c", str(path), "--seed", "1", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data['lexicon']) <= 6
        assert 'x' in data['phonology']['consonants']

    def test_unknown_preset(self):
        result = run_cli("generate", "--preset", "klingon")
        assert result.returncode == 1
        assert "Error:" in result.stderr
        assert "japanese" in result.stderr

    def test_invalid_config(self, tmp_path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("morpho_syntax: {word_order: XYZ}\n", encoding='utf-8')
        assert main(["generate", "-c", str(path)]) == 1
        assert "word order" in capsys.readouterr().err


class TestCLIOtherCommands:
    """Tests for sentences, romanize, assimilate, summary and presets."""

    def test_romanize(self, capsys):
        assert main(["romanize", "ʃaŋ", "θeð"]) == 0
        assert capsys.readouterr().out.split() == ["shang", "thedh"]

    def test_assimilate_json(self, capsys):
        assert main(["assimilate", "phone", "--preset", "japanese", "--json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert rows[0]['source'] == 'phone'
        assert rows[0]['ipa'] == '/phone/'
        assert rows[0]['roman'] == 'phone'

    def test_sentences(self, capsys):
        assert main(["sentences", "--seed", "3", "-n", "2", "--root-count", "40"]) == 0
        lines = [l for l in capsys.readouterr().out.splitlines() if l]
        assert len(lines) == 2
        for line in lines:
            assert line == INSUFFICIENT_VOCABULARY or "('The " in line

    def test_summary(self):
        result = run_cli("summary", "--preset", "english")
        assert result.returncode == 0, result.stderr
        assert "Phonology" in result.stdout

    def test_presets_json(self, capsys):
        assert main(["presets", "--json"]) == 0
        presets = json.loads(capsys.readouterr().out)
        assert presets['spanish']['vowels'] == 5

    def test_presets_quiet(self, capsys):
        assert main(["-q", "presets"]) == 0
        assert capsys.readouterr().out == ""
