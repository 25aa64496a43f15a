"""Approximate cyclomatic complexity by counting branching tokens.

This is a textual count, not an AST walk: keywords inside string literals
and comments are counted too.
"""

from __future__ import annotations

import re

BRANCH_PATTERNS = [
    re.compile(r"\bif\b"),
    re.compile(r"\belse\s+if\b"),
    re.compile(r"\bfor\b"),
    re.compile(r"\bwhile\b"),
    re.compile(r"\bcase\b"),
    re.compile(r"\bcatch\b"),
    re.compile(r"\?\s*+(?:[^\n]*+\s*+:|[^\n]*:)"),  # ternary
    re.compile(r"&&"),
    re.compile(r"\|\|"),
]


def calculate_complexity(code: str) -> int:
    """Return 1 plus the number of branch and logical-operator tokens."""
    complexity = 1
    for pattern in BRANCH_PATTERNS:
        complexity += len(pattern.findall(code))
    return complexity
