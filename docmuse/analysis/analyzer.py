"""Structural source-code analysis entry point.

Pattern-based extraction, not a parser: each supported language has a set
of independent regex passes (imports, functions, classes, exports), and every
language shares the same textual complexity count. Unsupported or
undetectable languages still get a complexity and line count.
"""

from __future__ import annotations

import logging
import re

from docmuse.analysis.complexity import calculate_complexity
from docmuse.analysis.go import analyze_go
from docmuse.analysis.models import CodeAnalysis
from docmuse.analysis.python import analyze_python
from docmuse.analysis.typescript import analyze_typescript

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ("typescript", "javascript", "python", "go")

# Checked in order; the first signature that matches wins
LANGUAGE_SIGNATURES: list[tuple[str, re.Pattern[str]]] = [
    ("typescript", re.compile(r"^import\s+.*from\s+['\"]|:\s*(?:string|number|boolean)\b")),
    ("python", re.compile(r"^def\s+\w+|^class\s+\w+.*:$", re.MULTILINE)),
    ("go", re.compile(r"^package\s+\w+|^func\s+")),
    ("javascript", re.compile(r"^const\s+|^let\s+|^function\s+")),
]


def detect_source_language(code: str) -> str:
    """Guess the language of a source string, or "unknown"."""
    for language, signature in LANGUAGE_SIGNATURES:
        if signature.search(code):
            return language
    return "unknown"


def analyze_source_structure(code: str, language: str | None = None) -> CodeAnalysis:
    """Extract functions, classes, imports, exports and complexity from source code."""
    lang = (language or "").lower() or detect_source_language(code)
    logger.debug(f"Analyzing {len(code)} chars of source as {lang}")

    if lang in ("typescript", "javascript"):
        return analyze_typescript(code, language=lang)
    if lang == "python":
        return analyze_python(code)
    if lang == "go":
        return analyze_go(code)

    return CodeAnalysis(
        language=lang,
        complexity=calculate_complexity(code),
        line_count=len(code.split("\n")),
    )
