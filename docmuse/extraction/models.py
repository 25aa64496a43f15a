"""Core data models for design-decision extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

CATEGORIES = ("architecture", "implementation", "library", "pattern", "other")
IMPORTANCE_TIERS = ("high", "medium", "low")

RATIONALE_NOT_STATED = "Rationale not explicitly stated"


@dataclass(frozen=True)
class ImportanceScore:
    score: int  # 0..100
    tier: str  # "high" | "medium" | "low"


@dataclass
class DesignDecision:
    id: str  # UUID
    title: str  # Short label derived from the sentence
    description: str  # The source line, verbatim
    rationale: str = RATIONALE_NOT_STATED
    alternatives: list[str] = field(default_factory=list)
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    category: str = "other"  # see CATEGORIES
    importance: str = "medium"  # "high" | "medium" | "low"
    importance_score: int = 50
    related_code: list[str] = field(default_factory=list)  # At most two snippets
    tradeoffs: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)  # At most five tokens

    def to_dict(self, include_score: bool = True) -> dict:
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "rationale": self.rationale,
            "alternatives": list(self.alternatives),
            "timestamp": self.timestamp,
            "category": self.category,
            "importance": self.importance,
            "importanceScore": self.importance_score,
            "relatedCode": list(self.related_code),
            "tradeoffs": list(self.tradeoffs),
            "keywords": list(self.keywords),
        }
        if not include_score:
            del data["importanceScore"]
        return data


@dataclass
class DecisionStats:
    total_decisions: int = 0
    by_category: dict[str, int] = field(default_factory=dict)
    by_importance: dict[str, int] = field(default_factory=dict)
    top_keywords: list[str] = field(default_factory=list)  # At most ten

    def to_dict(self) -> dict:
        return {
            "totalDecisions": self.total_decisions,
            "byCategory": dict(self.by_category),
            "byImportance": dict(self.by_importance),
            "topKeywords": list(self.top_keywords),
        }


@dataclass
class DecisionReport:
    decisions: list[DesignDecision]
    summary: str
    stats: DecisionStats
    language: str = "en"  # Language the patterns were applied in
    include_score: bool = True

    def to_dict(self) -> dict:
        return {
            "decisions": [d.to_dict(self.include_score) for d in self.decisions],
            "summary": self.summary,
            "stats": self.stats.to_dict(),
        }
