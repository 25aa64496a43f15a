"""Heuristic importance scoring for design decisions.

Scores are plain integers: a base of 50, bonuses for emphasis words and for
repeated mentions in the log, clamped to 0..100. No model calls, so the same
text always scores the same.
"""

from __future__ import annotations

import re

from docmuse.extraction.models import ImportanceScore

BASE_SCORE = 50
HIGH_BONUS = 30
MEDIUM_BONUS = 15
MENTION_BONUS = 5
MAX_MENTION_BONUS = 20
MENTION_PREFIX_LENGTH = 30

HIGH_THRESHOLD = 70
MEDIUM_THRESHOLD = 40

HIGH_IMPORTANCE_PATTERNS = [
    re.compile(r"critical|crucial|essential|must|required|key|important|major|significant", re.IGNORECASE),
    re.compile(r"핵심|중요|필수|반드시|꼭"),
]

MEDIUM_IMPORTANCE_PATTERNS = [
    re.compile(r"should|recommend|prefer|better|good|nice", re.IGNORECASE),
    re.compile(r"좋|권장|추천"),
]


def importance_tier(score: int) -> str:
    if score >= HIGH_THRESHOLD:
        return "high"
    if score >= MEDIUM_THRESHOLD:
        return "medium"
    return "low"


def count_mentions(decision: str, full_text: str) -> int:
    """Count case-insensitive occurrences of the decision's opening in the log."""
    prefix = decision[:MENTION_PREFIX_LENGTH]
    if not prefix:
        return 0
    return len(re.findall(re.escape(prefix), full_text, re.IGNORECASE))


def score_importance(decision: str, full_text: str) -> ImportanceScore:
    """Score a decision sentence against the conversation it came from."""
    score = BASE_SCORE

    for pattern in HIGH_IMPORTANCE_PATTERNS:
        if pattern.search(decision):
            score += HIGH_BONUS
    for pattern in MEDIUM_IMPORTANCE_PATTERNS:
        if pattern.search(decision):
            score += MEDIUM_BONUS

    score += min(count_mentions(decision, full_text) * MENTION_BONUS, MAX_MENTION_BONUS)

    score = min(max(score, 0), 100)
    return ImportanceScore(score=score, tier=importance_tier(score))
