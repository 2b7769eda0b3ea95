"""Tests for the command-line batch corrector."""

import io
import json

import pytest

from autotypo.cli import load_dictionary, main
from autotypo.exceptions import ConfigurationError


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("Teh pyhton code.\n", encoding="utf-8")
    return path


class TestLoadDictionary:
    """Tests for YAML/JSON dictionary files."""

    def test_yaml(self, tmp_path):
        path = tmp_path / "terms.yaml"
        path.write_text("pyhton: python\njaav: java\n", encoding="utf-8")
        assert load_dictionary(path) == {"pyhton": "python", "jaav": "java"}

    def test_json(self, tmp_path):
        path = tmp_path / "terms.json"
        path.write_text(json.dumps({"pyhton": "python"}), encoding="utf-8")
        assert load_dictionary(path) == {"pyhton": "python"}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_dictionary(path) == {}

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="mapping"):
            load_dictionary(path)

    def test_non_string_values(self, tmp_path):
        path = tmp_path / "nested.yaml"
        path.write_text("pyhton:\n  - python\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="string pair"):
            load_dictionary(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_dictionary(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("key: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid"):
            load_dictionary(path)


class TestMain:
    """Tests for the CLI entry point."""

    def test_summary_output(self, text_file, capsys):
        assert main([str(text_file)]) == 0
        out = capsys.readouterr().out
        assert f"{text_file}:0-3: Teh -> The (dictionary, 0.95) [The]" in out

    def test_apply(self, text_file, tmp_path, capsys):
        terms = tmp_path / "terms.yaml"
        terms.write_text("pyhton: python\n", encoding="utf-8")
        assert main(["--apply", "--dictionary", str(terms), str(text_file)]) == 0
        assert capsys.readouterr().out == "The python code.\n"

    def test_json(self, text_file, capsys):
        assert main(["--json", str(text_file)]) == 0
        reports = json.loads(capsys.readouterr().out)
        assert reports[0]["source"] == str(text_file)
        assert reports[0]["corrected"] == "Teh pyhton code.\n"
        assert reports[0]["corrections"][0]["original"] == "Teh"

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("adn teh"))
        assert main(["--apply"]) == 0
        assert capsys.readouterr().out == "and the"

    def test_ignore(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("adn teh"))
        assert main(["--apply", "--ignore", "teh"]) == 0
        assert capsys.readouterr().out == "and teh"

    def test_min_word_length_and_context(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("should of"))
        assert main(["--apply", "--min-word-length", "2"]) == 0
        assert capsys.readouterr().out == "should have"

        monkeypatch.setattr("sys.stdin", io.StringIO("should of"))
        assert main(["--apply", "--min-word-length", "2", "--no-context"]) == 0
        assert capsys.readouterr().out == "should of"

    def test_missing_input_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.txt")]) == 2
        assert "error" in capsys.readouterr().err

    def test_bad_dictionary(self, text_file, tmp_path, capsys):
        bad = tmp_path / "bad.yaml"
        bad.write_text("- not a mapping\n", encoding="utf-8")
        assert main(["--dictionary", str(bad), str(text_file)]) == 2
        assert "mapping" in capsys.readouterr().err

    def test_apply_and_json_exclusive(self, text_file):
        with pytest.raises(SystemExit) as excinfo:
            main(["--apply", "--json", str(text_file)])
        assert excinfo.value.code == 2
