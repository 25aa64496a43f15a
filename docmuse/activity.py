"""Activity logging for MCP tool calls.

Logs every MCP tool invocation to a JSONL file so humans can see what their
AI agent asked docmuse to extract or analyze. Each line is a JSON object with
timestamp, tool name, arguments, result preview, and duration.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path

from docmuse.config import DEFAULT_LOG_PATH

logger = logging.getLogger(__name__)

RESULT_PREVIEW_LIMIT = 500
ARGUMENT_PREVIEW_LIMIT = 200


def _resolve_log_path() -> Path:
    """Find the log file path from the env var, defaulting to the current directory."""
    env_path = os.getenv("DOCMUSE_LOG_PATH")
    if env_path:
        return Path(env_path)
    return DEFAULT_LOG_PATH


def _preview_arguments(arguments: dict) -> dict:
    """Shorten long string arguments (whole conversation logs, source files)."""
    preview = {}
    for key, value in arguments.items():
        if isinstance(value, str) and len(value) > ARGUMENT_PREVIEW_LIMIT:
            value = value[:ARGUMENT_PREVIEW_LIMIT] + f"... ({len(value)} chars)"
        preview[key] = value
    return preview


def log_tool_call(
    tool_name: str,
    arguments: dict,
    result_text: str,
    error: str | None,
    duration_ms: int,
) -> None:
    """Append a tool call entry to the activity log. Never raises."""
    try:
        entry = {
            "timestamp": datetime.now().isoformat(),
            "tool_name": tool_name,
            "arguments": _preview_arguments(arguments),
            "result_preview": result_text[:RESULT_PREVIEW_LIMIT] if result_text else "",
            "error": error,
            "duration_ms": duration_ms,
        }
        log_path = _resolve_log_path()
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, default=str, ensure_ascii=False) + "\n")
    except Exception as e:
        # Never crash the MCP server for logging
        logger.debug(f"Could not write activity log: {e}")


def read_activity_log(
    limit: int = 20,
    tool_name: str | None = None,
    log_path: Path | None = None,
) -> list[dict]:
    """Read recent activity log entries.

    Returns entries in reverse chronological order (most recent first).
    """
    path = log_path or _resolve_log_path()
    if not path.exists():
        return []

    entries: list[dict] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip():
            continue
        try:
            entry = json.loads(line)
        except json.JSONDecodeError:
            continue

        if tool_name and entry.get("tool_name") != tool_name:
            continue

        entries.append(entry)

    entries.reverse()
    return entries[:limit]
