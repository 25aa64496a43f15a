"""Tests for the docmuse CLI."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from docmuse.activity import log_tool_call
from docmuse.cli import app

runner = CliRunner()


class TestDecisionsCommand:
    def test_json_output(self, tmp_path: Path, english_log):
        log_file = tmp_path / "chat.txt"
        log_file.write_text(english_log, encoding="utf-8")
        result = runner.invoke(app, ["decisions", str(log_file), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["stats"]["totalDecisions"] == 3

    def test_options(self, tmp_path: Path, english_log):
        log_file = tmp_path / "chat.txt"
        log_file.write_text(english_log, encoding="utf-8")
        result = runner.invoke(app, [
            "decisions", str(log_file),
            "--max", "1",
            "--no-code",
            "--context", "Chat backend",
            "--format", "json",
        ])
        data = json.loads(result.stdout)
        assert len(data["decisions"]) == 1
        assert data["decisions"][0]["relatedCode"] == []
        assert data["summary"].endswith("Project Context: Chat backend")

    def test_text_output(self, tmp_path: Path, english_log):
        log_file = tmp_path / "chat.txt"
        log_file.write_text(english_log, encoding="utf-8")
        result = runner.invoke(app, ["decisions", str(log_file)])
        assert result.exit_code == 0
        assert "Found 3 design decision(s)" in result.stdout
        assert "By importance: high 2, medium 1" in result.stdout
        assert "By category: implementation 1, other 2" in result.stdout

    def test_no_decisions(self, tmp_path: Path):
        log_file = tmp_path / "chat.txt"
        log_file.write_text("nothing to see here", encoding="utf-8")
        result = runner.invoke(app, ["decisions", str(log_file)])
        assert result.exit_code == 0
        assert "No explicit design decisions" in result.stdout

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["decisions", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "File not found" in result.stdout

    def test_bad_format(self, tmp_path: Path):
        log_file = tmp_path / "chat.txt"
        log_file.write_text("We chose Redis.", encoding="utf-8")
        result = runner.invoke(app, ["decisions", str(log_file), "--format", "xml"])
        assert result.exit_code == 1


class TestAnalyzeCommand:
    def test_json_output(self, tmp_path: Path, python_source):
        source = tmp_path / "repo.py"
        source.write_text(python_source, encoding="utf-8")
        result = runner.invoke(app, ["analyze", str(source), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["analysis"]["language"] == "python"
        assert data["summary"]["totalClasses"] == 2
        assert "diagrams" not in data

    def test_diagrams(self, tmp_path: Path, go_source):
        source = tmp_path / "server.go"
        source.write_text(go_source, encoding="utf-8")
        result = runner.invoke(app, ["analyze", str(source), "--diagrams"])
        assert result.exit_code == 0
        assert "classDiagram" in result.stdout

    def test_explicit_language(self, tmp_path: Path):
        source = tmp_path / "snippet.txt"
        source.write_text("function add(a,b){return a+b;}", encoding="utf-8")
        result = runner.invoke(app, ["analyze", str(source), "--language", "typescript", "--format", "json"])
        data = json.loads(result.stdout)
        assert data["analysis"]["language"] == "typescript"

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["analyze", str(tmp_path / "missing.py")])
        assert result.exit_code == 1


class TestActivityCommand:
    def test_empty(self, activity_log_path: Path):
        result = runner.invoke(app, ["activity"])
        assert result.exit_code == 0
        assert "No activity recorded yet." in result.stdout

    def test_json(self, activity_log_path: Path):
        log_tool_call("analyze_code", {"code": "x"}, "{}", None, 3)
        result = runner.invoke(app, ["activity", "--format", "json"])
        entries = json.loads(result.stdout)
        assert entries[0]["tool_name"] == "analyze_code"
