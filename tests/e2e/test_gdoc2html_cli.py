#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/e2e/test_gdoc2html_cli.py
"""End-to-end tests for the gdoc2html command-line interface."""

import io
import json

import pytest
from utils import DOCUMENTS_DIR

from gdoc2html.cli import main
from gdoc2html.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_USAGE_ERROR

FIXTURE_PATH = DOCUMENTS_DIR / "exercise_document.json"


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Run every CLI test from an empty directory without config or token."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("GDOC2HTML_CONFIG", raising=False)
    monkeypatch.delenv("GDOC2HTML_TOKEN", raising=False)


@pytest.mark.e2e
@pytest.mark.cli
class TestCliRendering:
    """Rendering through the CLI."""

    def test_render_to_stdout(self, capsys):
        assert main([str(FIXTURE_PATH)]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert out.startswith("<h1 ")
        assert "Calculer f(0)" in out

    def test_render_to_file(self, tmp_path, capsys):
        target = tmp_path / "page.html"
        assert main([str(FIXTURE_PATH), "--out", str(target)]) == EXIT_SUCCESS
        assert target.read_text(encoding="utf-8").startswith("<h1 ")
        assert capsys.readouterr().out == ""

    def test_read_stdin(self, monkeypatch, capsys):
        payload = json.dumps({"body": {"content": [{"paragraph": {"elements": [{"textRun": {"content": "hi\n"}}]}}]}})
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(payload.encode("utf-8"))))
        assert main(["-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == '<p class="mb-4 leading-relaxed text-left">hi</p>'

    @pytest.mark.parametrize("section,present,absent", [("exercise", "Calculer", "f(0) = 3"), ("correction", "f(0) = 3", "Calculer")])
    def test_section_selection(self, capsys, section, present, absent):
        assert main([str(FIXTURE_PATH), "--section", section]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert present in out
        assert absent not in out

    def test_config_file_applied(self, tmp_path, capsys):
        (tmp_path / ".gdoc2html.toml").write_text('[style]\nlist_class = "puces"\n', encoding="utf-8")
        assert main([str(FIXTURE_PATH)]) == EXIT_SUCCESS
        assert '<ul class="puces">' in capsys.readouterr().out

    def test_no_config_skips_discovery(self, tmp_path, capsys):
        (tmp_path / ".gdoc2html.toml").write_text('[style]\nlist_class = "puces"\n', encoding="utf-8")
        assert main([str(FIXTURE_PATH), "--no-config"]) == EXIT_SUCCESS
        assert '<ul class="puces">' not in capsys.readouterr().out

    def test_no_escape_flag(self, tmp_path, capsys):
        source = tmp_path / "raw.json"
        source.write_text(
            json.dumps({"body": {"content": [{"paragraph": {"elements": [{"textRun": {"content": "<b>x</b>\n"}}]}}]}}),
            encoding="utf-8",
        )
        assert main([str(source), "--no-escape"]) == EXIT_SUCCESS
        assert "<b>x</b>" in capsys.readouterr().out


@pytest.mark.e2e
@pytest.mark.cli
class TestCliErrors:
    """Exit codes for usage and runtime errors."""

    def test_missing_input(self, capsys):
        assert main([]) == EXIT_USAGE_ERROR
        assert "INPUT or --document-id" in capsys.readouterr().err

    def test_document_id_without_token(self, capsys):
        assert main(["--document-id", "abc"]) == EXIT_USAGE_ERROR
        assert "--token" in capsys.readouterr().err

    def test_bad_config(self, tmp_path, capsys):
        bad = tmp_path / "bad.json"
        bad.write_text('{"max_nesting_depth": 0}', encoding="utf-8")
        assert main([str(FIXTURE_PATH), "--config", str(bad)]) == EXIT_USAGE_ERROR
        assert "Invalid configuration" in capsys.readouterr().err

    def test_missing_input_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "absent.json")]) == EXIT_ERROR
        assert "Could not read" in capsys.readouterr().err

    def test_malformed_input_file(self, tmp_path, capsys):
        source = tmp_path / "list.json"
        source.write_text("[1]", encoding="utf-8")
        assert main([str(source)]) == EXIT_ERROR
        assert "Expected a JSON document object" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "gdoc2html" in capsys.readouterr().out
