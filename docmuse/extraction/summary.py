"""Aggregate statistics and the bilingual prose summary of a decision set."""

from __future__ import annotations

from docmuse.extraction.keywords import rank_keywords
from docmuse.extraction.models import DecisionStats, DesignDecision

TOP_KEYWORD_LIMIT = 10

NO_DECISIONS = {
    "en": "No explicit design decisions were identified in the conversation.",
    "ko": "대화에서 명시적인 디자인 결정을 찾지 못했습니다.",
}

FOUND_TEMPLATE = {
    "en": "Found {total} design decision(s). High importance: {high}.\nCategories: {categories}",
    "ko": "총 {total}개의 디자인 결정을 발견했습니다. 중요도 높음: {high}개.\n주요 카테고리: {categories}",
}


def sort_by_importance(decisions: list[DesignDecision]) -> list[DesignDecision]:
    """Highest score first; equal scores keep extraction order."""
    return sorted(decisions, key=lambda d: d.importance_score, reverse=True)


def build_stats(decisions: list[DesignDecision]) -> DecisionStats:
    by_category: dict[str, int] = {}
    by_importance: dict[str, int] = {}
    all_keywords: list[str] = []

    for d in decisions:
        by_category[d.category] = by_category.get(d.category, 0) + 1
        by_importance[d.importance] = by_importance.get(d.importance, 0) + 1
        all_keywords.extend(d.keywords)

    return DecisionStats(
        total_decisions=len(decisions),
        by_category=by_category,
        by_importance=by_importance,
        top_keywords=rank_keywords(all_keywords, TOP_KEYWORD_LIMIT),
    )


def build_summary_text(stats: DecisionStats, language: str, project_context: str | None = None) -> str:
    lang = language if language in NO_DECISIONS else "en"
    if stats.total_decisions == 0:
        return NO_DECISIONS[lang]

    categories = ", ".join(f"{k}({v})" for k, v in stats.by_category.items())
    summary = FOUND_TEMPLATE[lang].format(
        total=stats.total_decisions,
        high=stats.by_importance.get("high", 0),
        categories=categories,
    )
    if project_context:
        summary += f"\n\nProject Context: {project_context}"
    return summary


def summarize(
    decisions: list[DesignDecision],
    language: str,
    project_context: str | None = None,
) -> tuple[list[DesignDecision], DecisionStats, str]:
    """Rank decisions and build their stats and summary text.

    Returns the decisions sorted by importance, the stats computed over them,
    and the localized summary.
    """
    ranked = sort_by_importance(decisions)
    stats = build_stats(ranked)
    return ranked, stats, build_summary_text(stats, language, project_context)
