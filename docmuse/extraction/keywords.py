"""Keyword extraction: tokenization, stopword removal, frequency ranking."""

from __future__ import annotations

import re

# Everything except ASCII word characters, whitespace and Hangul syllables
NON_WORD = re.compile(r"[^A-Za-z0-9_\s가-힣]")

MIN_TOKEN_LENGTH = 3
MAX_DECISION_KEYWORDS = 5

STOP_WORDS = frozenset({
    "the", "a", "an", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "must", "shall", "can", "need", "dare",
    "ought", "used", "to", "of", "in", "for", "on", "with", "at", "by",
    "from", "as", "into", "through", "during", "before", "after", "above",
    "below", "between", "under", "again", "further", "then", "once",
    "here", "there", "when", "where", "why", "how", "all", "each", "few",
    "more", "most", "other", "some", "such", "no", "nor", "not", "only",
    "own", "same", "so", "than", "too", "very", "just", "and", "but", "or",
    "if", "because", "until", "while", "this", "that", "these", "those",
    "it", "its", "we", "our", "i", "my", "you", "your", "he", "his", "she",
    "her", "they", "their", "them", "us", "me", "him", "what", "which",
    "who", "whom", "also", "about", "against", "any", "both", "down", "off",
    "out", "over", "up", "yours", "ours", "theirs", "itself", "myself",
    "let", "lets", "get", "got", "one",
})


def tokenize(text: str, lowercase: bool = True) -> list[str]:
    """Replace punctuation with spaces and split on whitespace."""
    if lowercase:
        text = text.lower()
    return NON_WORD.sub(" ", text).split()


def rank_keywords(tokens: list[str], limit: int = 10) -> list[str]:
    """Order tokens by frequency, ties broken by first occurrence."""
    counts: dict[str, int] = {}
    for token in tokens:
        counts[token] = counts.get(token, 0) + 1
    # sorted() is stable and dicts keep insertion order, so ties stay first-seen
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [token for token, _count in ranked[:limit]]


def extract_keywords(text: str, max_count: int = 10) -> list[str]:
    """Return the most frequent non-stopword tokens of the text."""
    tokens = [
        token for token in tokenize(text)
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]
    return rank_keywords(tokens, max_count)


def decision_keywords(text: str) -> list[str]:
    """First five tokens longer than two characters, in source order."""
    tokens = [token for token in tokenize(text) if len(token) >= MIN_TOKEN_LENGTH]
    return tokens[:MAX_DECISION_KEYWORDS]
