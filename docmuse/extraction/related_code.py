"""Associate fenced code blocks in a conversation with decisions."""

from __future__ import annotations

import re

CODE_BLOCK = re.compile(r"```\w*\n(.*?)```", re.DOTALL)

MAX_RELATED_CODE = 2


def extract_code_blocks(text: str) -> list[str]:
    """Return the non-empty fenced code blocks of a log, in source order."""
    blocks: list[str] = []
    for match in CODE_BLOCK.finditer(text):
        body = match.group(1).strip()
        if body:
            blocks.append(body)
    return blocks


def link_code(keywords: list[str], blocks: list[str], limit: int = MAX_RELATED_CODE) -> list[str]:
    """Pick the first blocks that mention any of the keywords (case-insensitive)."""
    if not keywords:
        return []
    lowered = [kw.lower() for kw in keywords]
    related = [block for block in blocks if any(kw in block.lower() for kw in lowered)]
    return related[:limit]
