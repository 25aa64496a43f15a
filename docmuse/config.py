"""Configuration loading for docmuse.

Config sources (in priority order):
1. Explicit arguments passed to functions (tool arguments, CLI options)
2. Environment variables (DOCMUSE_LANGUAGE, etc.)
3. .env file in current directory
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LANGUAGE = "auto"
DEFAULT_MAX_DECISIONS = 20
MAX_DECISIONS_CEILING = 50
DEFAULT_CACHE_TTL = 300.0
DEFAULT_LOG_PATH = Path("docmuse-activity.jsonl")

VALID_LANGUAGES = ("auto", "en", "ko")

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw) if raw else default
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    try:
        return float(raw) if raw else default
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name, "")
    if not raw:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass
class Config:
    language: str = DEFAULT_LANGUAGE  # "auto" | "en" | "ko"
    max_decisions: int = DEFAULT_MAX_DECISIONS
    extract_related_code: bool = True
    cache_size: int = 0  # 0 disables memoization
    cache_ttl: float = DEFAULT_CACHE_TTL  # seconds
    log_path: Path = DEFAULT_LOG_PATH

    @classmethod
    def load(cls) -> Config:
        return cls(
            language=os.getenv("DOCMUSE_LANGUAGE", DEFAULT_LANGUAGE),
            max_decisions=_env_int("DOCMUSE_MAX_DECISIONS", DEFAULT_MAX_DECISIONS),
            extract_related_code=_env_bool("DOCMUSE_EXTRACT_RELATED_CODE", True),
            cache_size=_env_int("DOCMUSE_CACHE_SIZE", 0),
            cache_ttl=_env_float("DOCMUSE_CACHE_TTL", DEFAULT_CACHE_TTL),
            log_path=Path(os.getenv("DOCMUSE_LOG_PATH", str(DEFAULT_LOG_PATH))),
        )

    def validate(self) -> list[str]:
        """Return a list of config issues."""
        issues = []
        if self.language not in VALID_LANGUAGES:
            issues.append(f"Unsupported language '{self.language}' (DOCMUSE_LANGUAGE: auto, en or ko)")
        if not 1 <= self.max_decisions <= MAX_DECISIONS_CEILING:
            issues.append(
                f"Max decisions must be between 1 and {MAX_DECISIONS_CEILING} (DOCMUSE_MAX_DECISIONS)"
            )
        if self.cache_size < 0:
            issues.append("Cache size cannot be negative (DOCMUSE_CACHE_SIZE)")
        return issues
