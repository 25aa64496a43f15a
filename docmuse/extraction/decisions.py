"""Design-decision extraction from conversation logs.

Decision detection is line-level classification: every non-blank line is
tested against the decision-statement patterns of the active language, and
each matching line becomes one candidate decision. Rationale, alternatives
and trade-offs are pulled from the same line with the other pattern groups,
then each decision is scored, tagged with keywords and linked to code blocks
from the log.

The whole pass is a pure function of its inputs apart from generated ids and
timestamps.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from docmuse.extraction import patterns as pl
from docmuse.extraction.keywords import decision_keywords, tokenize
from docmuse.extraction.language import resolve_language
from docmuse.extraction.models import RATIONALE_NOT_STATED, DecisionReport, DesignDecision
from docmuse.extraction.related_code import extract_code_blocks, link_code
from docmuse.extraction.scoring import score_importance
from docmuse.extraction.summary import summarize

logger = logging.getLogger(__name__)

DEFAULT_MAX_DECISIONS = 20
MAX_DECISIONS_CEILING = 50
MAX_TITLE_LENGTH = 50


def clamp_max_decisions(value: int | float | None) -> int:
    if value is None:
        return DEFAULT_MAX_DECISIONS
    return min(max(int(value), 1), MAX_DECISIONS_CEILING)


def find_decision_lines(conversation_log: str, language: str) -> list[str]:
    """Return the distinct decision-bearing lines, in first-seen order."""
    decision_patterns = pl.get_patterns(language, pl.DECISION)
    seen: dict[str, None] = {}

    for raw_line in conversation_log.splitlines():
        line = raw_line.strip()
        if not line or line in seen:
            continue
        for pattern in decision_patterns:
            if pattern.search(line):
                seen[line] = None
                break

    return list(seen)


def build_title(sentence: str, category: str) -> str:
    """First three tokens longer than two characters, or a category label."""
    words = [w for w in tokenize(sentence, lowercase=False) if len(w) > 2][:3]
    if not words:
        return f"{category.capitalize()} Decision"
    return " ".join(words)[:MAX_TITLE_LENGTH]


def build_decision(
    sentence: str,
    conversation_log: str,
    language: str,
    code_blocks: list[str],
) -> DesignDecision:
    category = pl.infer_category(sentence, language)
    importance = score_importance(sentence, conversation_log)
    rationale = pl.match_patterns(sentence, pl.get_patterns(language, pl.RATIONALE))
    keywords = decision_keywords(sentence)

    return DesignDecision(
        id=str(uuid.uuid4()),
        title=build_title(sentence, category),
        description=sentence,
        rationale=rationale[0] if rationale else RATIONALE_NOT_STATED,
        alternatives=pl.match_patterns(sentence, pl.get_patterns(language, pl.ALTERNATIVE)),
        timestamp=datetime.now().isoformat(),
        category=category,
        importance=importance.tier,
        importance_score=importance.score,
        related_code=link_code(keywords, code_blocks),
        tradeoffs=pl.match_patterns(sentence, pl.get_patterns(language, pl.TRADEOFF)),
        keywords=keywords,
    )


def extract_design_decisions(
    conversation_log: str,
    project_context: str | None = None,
    language: str | None = "auto",
    include_importance_score: bool = True,
    extract_related_code: bool = True,
    max_decisions: int | None = DEFAULT_MAX_DECISIONS,
) -> DecisionReport:
    """Turn a conversation log into ranked design decisions with stats and a summary.

    Never raises for empty or unmatched input; both produce an empty report
    with the localized "no decisions" summary.
    """
    lang = resolve_language(language, conversation_log)
    limit = clamp_max_decisions(max_decisions)

    lines = find_decision_lines(conversation_log, lang)
    if len(lines) > limit:
        logger.debug(f"Dropping {len(lines) - limit} decision line(s) over the cap of {limit}")
    lines = lines[:limit]

    code_blocks = extract_code_blocks(conversation_log) if extract_related_code else []
    decisions = [build_decision(line, conversation_log, lang, code_blocks) for line in lines]

    ranked, stats, summary = summarize(decisions, lang, project_context)
    logger.info(f"Extracted {len(ranked)} design decision(s) (language={lang})")

    return DecisionReport(
        decisions=ranked,
        summary=summary,
        stats=stats,
        language=lang,
        include_score=include_importance_score,
    )
