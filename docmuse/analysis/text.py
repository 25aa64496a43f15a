"""Small text helpers shared by the per-language analyzers."""

from __future__ import annotations

OPENERS = {"(": ")", "[": "]", "{": "}", "<": ">"}
CLOSERS = {v: k for k, v in OPENERS.items()}


def line_number_at(code: str, offset: int) -> int:
    """1-based line number of a character offset."""
    return code.count("\n", 0, offset) + 1


def dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def split_top_level(text: str, sep: str = ",") -> list[str]:
    """Split on a separator that is not nested in brackets, e.g. ``a: dict[str, int], b``."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in text:
        if ch in OPENERS:
            depth += 1
        elif ch in CLOSERS and depth > 0:
            depth -= 1
        if ch == sep and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return [p.strip() for p in parts if p.strip()]


def find_block_end(code: str, start: int) -> int:
    """Index of the brace closing a block whose body starts at ``start``.

    Returns ``len(code)`` when the block is never closed.
    """
    depth = 1
    for i in range(start, len(code)):
        if code[i] == "{":
            depth += 1
        elif code[i] == "}":
            depth -= 1
            if depth == 0:
                return i
    return len(code)


def mask_nested_blocks(body: str) -> str:
    """Blank out everything nested in braces, keeping offsets and newlines intact.

    Leaves only the top level of a class body visible, so member patterns do
    not match statements inside method bodies.
    """
    out: list[str] = []
    depth = 0
    for ch in body:
        if ch == "{":
            depth += 1
            out.append(ch if depth == 1 else " ")
            continue
        if ch == "}":
            depth -= 1
            out.append(ch if depth == 0 else " ")
            continue
        if depth > 0 and ch != "\n":
            out.append(" ")
        else:
            out.append(ch)
    return "".join(out)
