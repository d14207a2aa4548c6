"""
Tests for trend_vader/cli.py

    pytest tests/test_cli.py -v
"""
import json

import pytest

from trend_vader import cli


@pytest.fixture
def lexicon_file(tmp_path):
    path = tmp_path / "lex.txt"
    path.write_text("good\t1.9\nbad\t-2.5\n", encoding="utf-8")
    return str(path)


def _json_rows(out: str):
    return [json.loads(line) for line in out.splitlines() if line.strip()]


class TestLegacyPrefix:
    def test_prefix_is_stripped(self):
        assert cli._strip_legacy_prefix("/TEXT=good day") == "good day"

    def test_prefix_is_case_insensitive(self):
        assert cli._strip_legacy_prefix("/text=good day") == "good day"

    def test_bare_prefix_and_plain_text_unchanged(self):
        assert cli._strip_legacy_prefix("/TEXT=") == "/TEXT="
        assert cli._strip_legacy_prefix("good day") == "good day"


class TestMain:
    def test_json_output(self, lexicon_file, capsys):
        rc = cli.main(["--lexicon", lexicon_file, "--json", "The movie was good.", "/TEXT=not good"])
        assert rc == 0
        rows = _json_rows(capsys.readouterr().out)
        assert [r["text"] for r in rows] == ["The movie was good.", "not good"]
        assert rows[0]["compound"] == 0.4404
        assert rows[0]["label"] == "Positive"
        assert rows[1]["compound"] == -0.3412

    def test_texts_from_file(self, lexicon_file, tmp_path, capsys):
        texts = tmp_path / "texts.txt"
        texts.write_text("good\n\n   \nbad\n", encoding="utf-8")
        rc = cli.main(["--lexicon", lexicon_file, "--json", "--file", str(texts)])
        assert rc == 0
        rows = _json_rows(capsys.readouterr().out)
        assert [r["text"] for r in rows] == ["good", "bad"]
        assert rows[0]["compound"] > 0 > rows[1]["compound"]

    def test_table_output(self, lexicon_file, capsys):
        rc = cli.main(["--lexicon", lexicon_file, "good"])
        assert rc == 0
        assert "good" in capsys.readouterr().out

    def test_no_text_fails(self, lexicon_file):
        assert cli.main(["--lexicon", lexicon_file]) == 1

    def test_missing_text_file_fails(self, lexicon_file, tmp_path):
        assert cli.main(["--lexicon", lexicon_file, "--file", str(tmp_path / "nope.txt")]) == 1

    def test_empty_lexicon_fails(self, tmp_path):
        assert cli.main(["--lexicon", str(tmp_path / "missing.txt"), "good"]) == 1
