"""Code report: analysis plus counts, plain-language insights and diagrams."""

from __future__ import annotations

from dataclasses import dataclass, field

from docmuse.analysis import diagrams
from docmuse.analysis.analyzer import analyze_source_structure
from docmuse.analysis.models import CodeAnalysis

DIAGRAM_TYPES = ("class", "flowchart", "dependency", "all")

HIGH_COMPLEXITY = 20
MODERATE_COMPLEXITY = 10
MANY_DEPENDENCIES = 10


@dataclass
class CodeReport:
    analysis: CodeAnalysis
    summary: dict
    insights: list[str] = field(default_factory=list)
    diagrams: list[dict] | None = None  # [{"type": ..., "diagram": ...}]

    def to_dict(self) -> dict:
        data = {
            "analysis": self.analysis.to_dict(),
            "summary": self.summary,
            "insights": list(self.insights),
        }
        if self.diagrams is not None:
            data["diagrams"] = self.diagrams
        return data


def summarize_analysis(analysis: CodeAnalysis) -> dict:
    return {
        "totalFunctions": len(analysis.functions),
        "totalClasses": len(analysis.classes),
        "totalImports": len(analysis.imports),
        "complexity": analysis.complexity,
        "exportedItems": len(analysis.exports),
        "dependencies": list(analysis.dependencies),
    }


def build_insights(analysis: CodeAnalysis) -> list[str]:
    insights: list[str] = []

    if analysis.complexity > HIGH_COMPLEXITY:
        insights.append(
            f"High complexity ({analysis.complexity}): Consider breaking down into smaller functions"
        )
    elif analysis.complexity > MODERATE_COMPLEXITY:
        insights.append(f"Moderate complexity ({analysis.complexity}): Code is reasonably structured")
    else:
        insights.append(f"Low complexity ({analysis.complexity}): Code is simple and easy to maintain")

    async_functions = [f.name for f in analysis.functions if f.is_async]
    if async_functions:
        insights.append(f"Found {len(async_functions)} async function(s): {', '.join(async_functions)}")

    exported_classes = [c.name for c in analysis.classes if c.exported]
    if exported_classes:
        insights.append(f"Exported {len(exported_classes)} class(es): {', '.join(exported_classes)}")

    if len(analysis.dependencies) > MANY_DEPENDENCIES:
        insights.append(
            f"High dependency count ({len(analysis.dependencies)}): "
            "Consider reducing external dependencies"
        )

    return insights


def build_diagrams(analysis: CodeAnalysis, filename: str, diagram_types: list[str]) -> list[dict]:
    def wanted(kind: str) -> bool:
        return "all" in diagram_types or kind in diagram_types

    result: list[dict] = []
    if wanted("class") and analysis.classes:
        result.append({"type": "class", "diagram": diagrams.class_diagram(analysis.classes)})
    if wanted("flowchart") and analysis.functions:
        result.append({"type": "flowchart", "diagram": diagrams.flowchart(analysis.functions)})
    if wanted("dependency") and analysis.imports:
        result.append({
            "type": "dependency",
            "diagram": diagrams.dependency_graph([(filename, analysis)]),
        })
    return result


def build_code_report(
    code: str,
    language: str | None = None,
    filename: str = "unknown",
    generate_diagrams: bool = True,
    diagram_types: list[str] | None = None,
    analyze=analyze_source_structure,
) -> CodeReport:
    """Analyze code and wrap the result with a summary, insights and optional diagrams.

    ``analyze`` can be swapped for a memoized analyzer (see docmuse.cache).
    """
    analysis = analyze(code, language)
    return CodeReport(
        analysis=analysis,
        summary=summarize_analysis(analysis),
        insights=build_insights(analysis),
        diagrams=build_diagrams(analysis, filename, diagram_types or ["all"]) if generate_diagrams else None,
    )
