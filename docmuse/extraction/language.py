"""English/Korean language detection by character ratio."""

from __future__ import annotations

import re

HANGUL_SYLLABLE = re.compile(r"[\uac00-\ud7af]")
WHITESPACE = re.compile(r"\s")

# Share of Hangul syllables above which text is treated as Korean
KOREAN_RATIO_THRESHOLD = 0.1

SUPPORTED_LANGUAGES = ("en", "ko")


def detect_language(text: str) -> str:
    """Return "ko" when Hangul makes up more than 10% of non-space characters, else "en"."""
    total_chars = len(WHITESPACE.sub("", text))
    if total_chars == 0:
        return "en"
    korean_count = len(HANGUL_SYLLABLE.findall(text))
    return "ko" if korean_count / total_chars > KOREAN_RATIO_THRESHOLD else "en"


def resolve_language(requested: str | None, text: str) -> str:
    """Resolve an "auto"/missing language to a detected one; unknown codes fall back to English."""
    if not requested or requested == "auto":
        return detect_language(text)
    if requested not in SUPPORTED_LANGUAGES:
        return "en"
    return requested
