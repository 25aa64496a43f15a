"""Mermaid diagram text from structural analysis results."""

from __future__ import annotations

import re

from docmuse.analysis.models import ClassInfo, CodeAnalysis, FunctionInfo

UNSAFE_NODE_CHARS = re.compile(r"[^A-Za-z0-9_]")

DEFAULT_MAX_NODES = 50


def sanitize_node_name(name: str) -> str:
    return UNSAFE_NODE_CHARS.sub("_", name)


def class_diagram(classes: list[ClassInfo], show_private: bool = False) -> str:
    lines = ["classDiagram"]
    for cls in classes:
        lines.append(f"    class {cls.name} {{")
        for prop in cls.properties:
            if not show_private and prop.startswith("_"):
                continue
            lines.append(f"        +{prop}")
        for method in cls.methods:
            if not show_private and method.name.startswith("_"):
                continue
            async_prefix = "<<async>> " if method.is_async else ""
            lines.append(f"        +{async_prefix}{method.name}()")
        lines.append("    }")
        if cls.extends:
            lines.append(f"    {cls.extends} <|-- {cls.name}")
        for iface in cls.implements:
            lines.append(f"    {iface} <|.. {cls.name}")
    return "\n".join(lines)


def flowchart(functions: list[FunctionInfo], direction: str = "TB") -> str:
    """Functions as sequential nodes; async functions drawn as hexagons."""
    lines = [f"flowchart {direction}"]
    previous: str | None = None
    for func in functions:
        node = sanitize_node_name(func.name)
        shape = f"{node}{{{{{func.name}}}}}" if func.is_async else f"{node}[{func.name}]"
        lines.append(f"    {shape}")
        if previous is not None:
            lines.append(f"    {previous} --> {node}")
        previous = node
    return "\n".join(lines)


def dependency_graph(
    analyses: list[tuple[str, CodeAnalysis]],
    direction: str = "LR",
    max_nodes: int = DEFAULT_MAX_NODES,
) -> str:
    """Graph of relative imports between files; external packages are left out."""
    lines = [f"flowchart {direction}"]
    nodes: dict[str, None] = {}
    edges: list[str] = []

    for filename, analysis in analyses:
        node = sanitize_node_name(filename)
        nodes[node] = None
        for imp in analysis.imports:
            if not imp.is_relative:
                continue
            target = sanitize_node_name(imp.source)
            nodes[target] = None
            edges.append(f"    {node} --> {target}")
        if len(nodes) >= max_nodes:
            break

    lines.extend(f"    {node}[{node}]" for node in nodes)
    lines.extend(edges)
    return "\n".join(lines)
