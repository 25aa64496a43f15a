"""MCP server for docmuse.

Exposes design-decision extraction and structural code analysis to AI coding
agents via the Model Context Protocol. Agents hand over a conversation log or
a source file and get structured JSON back.

Usage:
    python -m docmuse.mcp_server

Configure in Claude Code (~/.claude.json):
    {
      "mcpServers": {
        "docmuse": {
          "command": "docmuse",
          "args": ["serve"]
        }
      }
    }
"""

from __future__ import annotations

import json
import logging
import time

import mcp.server.stdio
import mcp.types as types
from mcp.server import Server

from docmuse.activity import log_tool_call
from docmuse.analysis.analyzer import SUPPORTED_LANGUAGES, analyze_source_structure
from docmuse.analysis.report import DIAGRAM_TYPES, build_code_report
from docmuse.cache import maybe_memoize
from docmuse.config import Config
from docmuse.extraction.decisions import extract_design_decisions

logger = logging.getLogger(__name__)

CONFIG = Config.load()

server = Server("docmuse")

_extract = maybe_memoize(extract_design_decisions, CONFIG.cache_size, CONFIG.cache_ttl)
_analyze = maybe_memoize(analyze_source_structure, CONFIG.cache_size, CONFIG.cache_ttl)


@server.list_tools()
async def list_tools() -> list[types.Tool]:
    return [
        types.Tool(
            name="summarize_design_decisions",
            description=(
                "Extract the design decisions made in a development conversation. "
                "Pass the raw conversation log (English or Korean) and get back each "
                "decision with its rationale, alternatives, trade-offs, category, "
                "importance and related code, plus summary statistics. "
                "Call this at the END of a design discussion to document what was decided."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "conversationLog": {
                        "type": "string",
                        "description": "The conversation text to scan for decisions",
                    },
                    "projectContext": {
                        "type": "string",
                        "description": "Optional project description appended to the summary",
                    },
                    "language": {
                        "type": "string",
                        "enum": ["en", "ko", "auto"],
                        "description": "Language of the log (default: auto-detect)",
                    },
                    "includeImportanceScore": {
                        "type": "boolean",
                        "description": "Include numeric importance scores (default: true)",
                    },
                    "extractRelatedCode": {
                        "type": "boolean",
                        "description": "Attach matching code blocks from the log (default: true)",
                    },
                    "maxDecisions": {
                        "type": "integer",
                        "minimum": 1,
                        "maximum": 50,
                        "description": "Maximum number of decisions to return (default: 20)",
                    },
                },
                "required": ["conversationLog"],
            },
        ),
        types.Tool(
            name="analyze_code",
            description=(
                "Analyze the structure of a source file: functions, classes, imports, "
                "exports, external dependencies and cyclomatic complexity. "
                "Supports TypeScript, JavaScript, Python and Go, and can render "
                "Mermaid class, flowchart and dependency diagrams."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "code": {
                        "type": "string",
                        "description": "Source code to analyze",
                    },
                    "language": {
                        "type": "string",
                        "enum": list(SUPPORTED_LANGUAGES),
                        "description": "Source language (default: auto-detect)",
                    },
                    "filename": {
                        "type": "string",
                        "description": "File name used as the node label in dependency diagrams",
                    },
                    "generateDiagrams": {
                        "type": "boolean",
                        "description": "Render Mermaid diagrams (default: true)",
                    },
                    "diagramTypes": {
                        "type": "array",
                        "items": {"type": "string", "enum": list(DIAGRAM_TYPES)},
                        "description": "Which diagrams to render (default: all)",
                    },
                },
                "required": ["code"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[types.TextContent]:
    start = time.time()
    result: list[types.TextContent] = []
    error: str | None = None
    try:
        result = _dispatch_tool(name, arguments or {})
        return result
    except Exception as e:
        logger.warning(f"Tool {name} failed: {e}")
        error = str(e)
        result = [types.TextContent(type="text", text=f"Error: {e}")]
        return result
    finally:
        duration_ms = int((time.time() - start) * 1000)
        result_text = result[0].text if result else ""
        log_tool_call(name, arguments or {}, result_text, error, duration_ms)


def _dispatch_tool(name: str, arguments: dict) -> list[types.TextContent]:
    """Route a tool call to the appropriate handler."""
    if name == "summarize_design_decisions":
        return _handle_summarize(arguments)
    elif name == "analyze_code":
        return _handle_analyze(arguments)
    else:
        return [types.TextContent(type="text", text=f"Unknown tool: {name}")]


def _require_text(arguments: dict, key: str) -> str:
    value = arguments.get(key)
    if not isinstance(value, str):
        raise ValueError(f"'{key}' is required and must be a string")
    return value


def _handle_summarize(arguments: dict) -> list[types.TextContent]:
    conversation_log = _require_text(arguments, "conversationLog")
    report = _extract(
        conversation_log,
        project_context=arguments.get("projectContext"),
        language=arguments.get("language", CONFIG.language),
        include_importance_score=arguments.get("includeImportanceScore", True),
        extract_related_code=arguments.get("extractRelatedCode", CONFIG.extract_related_code),
        max_decisions=arguments.get("maxDecisions", CONFIG.max_decisions),
    )
    return [types.TextContent(type="text", text=json.dumps(report.to_dict(), indent=2, ensure_ascii=False))]


def _handle_analyze(arguments: dict) -> list[types.TextContent]:
    code = _require_text(arguments, "code")
    report = build_code_report(
        code,
        language=arguments.get("language"),
        filename=arguments.get("filename", "unknown"),
        generate_diagrams=arguments.get("generateDiagrams", True),
        diagram_types=arguments.get("diagramTypes"),
        analyze=_analyze,
    )
    return [types.TextContent(type="text", text=json.dumps(report.to_dict(), indent=2))]


async def main() -> None:
    for issue in CONFIG.validate():
        logger.warning(issue)
    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


if __name__ == "__main__":
    import asyncio
    asyncio.run(main())
