"""Tests for docmuse.mcp_server tool listing and dispatch."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

from docmuse.activity import read_activity_log
from docmuse.mcp_server import call_tool, list_tools


def _call(name: str, arguments: dict) -> str:
    result = asyncio.run(call_tool(name, arguments))
    assert len(result) == 1
    return result[0].text


class TestListTools:
    def test_tool_names(self):
        tools = asyncio.run(list_tools())
        assert [t.name for t in tools] == ["summarize_design_decisions", "analyze_code"]

    def test_required_arguments(self):
        tools = {t.name: t for t in asyncio.run(list_tools())}
        assert tools["summarize_design_decisions"].inputSchema["required"] == ["conversationLog"]
        assert tools["analyze_code"].inputSchema["required"] == ["code"]


class TestSummarizeDesignDecisions:
    def test_returns_report_json(self, activity_log_path: Path):
        text = _call("summarize_design_decisions", {
            "conversationLog": "I decided to use TypeScript because of type safety.",
        })
        data = json.loads(text)
        assert len(data["decisions"]) == 1
        assert data["decisions"][0]["category"] == "implementation"
        assert data["stats"]["totalDecisions"] == 1

    def test_options_forwarded(self, activity_log_path: Path, english_log):
        data = json.loads(_call("summarize_design_decisions", {
            "conversationLog": english_log,
            "projectContext": "Chat backend",
            "includeImportanceScore": False,
            "extractRelatedCode": False,
            "maxDecisions": 2,
        }))
        assert len(data["decisions"]) == 2
        assert all("importanceScore" not in d for d in data["decisions"])
        assert all(d["relatedCode"] == [] for d in data["decisions"])
        assert data["summary"].endswith("Project Context: Chat backend")

    def test_integral_float_limit(self, activity_log_path: Path):
        data = json.loads(_call("summarize_design_decisions", {
            "conversationLog": "We chose Redis.\nWe chose Kafka.",
            "maxDecisions": 1.0,
        }))
        assert len(data["decisions"]) == 1

    def test_korean_output_not_escaped(self, activity_log_path: Path):
        text = _call("summarize_design_decisions", {"conversationLog": "", "language": "ko"})
        assert "대화에서" in text

    def test_missing_log_is_an_error(self, activity_log_path: Path):
        text = _call("summarize_design_decisions", {})
        assert text.startswith("Error: ")
        assert "conversationLog" in text


class TestAnalyzeCode:
    def test_returns_report_json(self, activity_log_path: Path):
        data = json.loads(_call("analyze_code", {"code": "function add(a,b){return a+b;}"}))
        assert data["analysis"]["language"] == "javascript"
        assert data["analysis"]["functions"][0]["name"] == "add"
        assert data["summary"]["complexity"] == 1
        assert [d["type"] for d in data["diagrams"]] == ["flowchart"]

    def test_explicit_language_and_no_diagrams(self, activity_log_path: Path):
        data = json.loads(_call("analyze_code", {
            "code": "import os\nimport sys\ndef f():\n    if True:\n        pass",
            "language": "python",
            "generateDiagrams": False,
        }))
        assert data["summary"]["dependencies"] == ["os", "sys"]
        assert data["summary"]["complexity"] == 2
        assert "diagrams" not in data

    def test_missing_code_is_an_error(self, activity_log_path: Path):
        assert _call("analyze_code", {"language": "python"}).startswith("Error: ")


class TestDispatch:
    def test_unknown_tool(self, activity_log_path: Path):
        assert _call("no_such_tool", {}) == "Unknown tool: no_such_tool"

    def test_calls_are_logged(self, activity_log_path: Path):
        _call("analyze_code", {"code": "const x = 1;"})
        _call("analyze_code", {})
        entries = read_activity_log()
        assert [e["tool_name"] for e in entries] == ["analyze_code", "analyze_code"]
        assert entries[0]["error"] is not None
        assert entries[1]["error"] is None
