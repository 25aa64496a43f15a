"""Go structural extraction. Structs stand in for classes."""

from __future__ import annotations

import re

from docmuse.analysis.complexity import calculate_complexity
from docmuse.analysis.models import ClassInfo, CodeAnalysis, FunctionInfo, ImportInfo
from docmuse.analysis.text import dedupe, find_block_end, line_number_at, split_top_level

IMPORT_RE = re.compile(r"\bimport\s+(?:\(([^)]*)\)|(?:[\w.]+\s+)?\"([^\"]+)\")")
IMPORT_PATH_RE = re.compile(r"\"([^\"]+)\"")

FUNCTION_RE = re.compile(
    r"\bfunc\s+(?:\((?:(\w+)\s+)?\*?(\w+)(?:\[[^\]]*\])?\)\s*)?(\w+)\s*(?:\[[^\]]*\])?"
    r"\(([^)]*)\)(?:\s*\(([^)]*)\)|\s*([\w.*\[\]]+))?\s*\{"
)

STRUCT_RE = re.compile(r"\btype\s+(\w+)\s+struct\s*\{")

FIELD_RE = re.compile(r"^[ \t]*(\w+(?:[ \t]*,[ \t]*\w+)*)[ \t]+[^\s/]", re.MULTILINE)
EMBEDDED_RE = re.compile(r"^[ \t]*\*?([\w.]+)[ \t]*(?:`[^`]*`)?[ \t]*$", re.MULTILINE)


def _is_exported(name: str) -> bool:
    return name[:1].isupper()


def _import(source: str) -> ImportInfo:
    return ImportInfo(source=source, names=[source.split("/")[-1] or source])


def _extract_imports(code: str) -> tuple[list[ImportInfo], list[str]]:
    imports: list[ImportInfo] = []
    for match in IMPORT_RE.finditer(code):
        block, single = match.groups()
        sources = IMPORT_PATH_RE.findall(block) if block is not None else [single]
        imports.extend(_import(source) for source in sources)
    dependencies = dedupe([imp.source.split("/")[0] for imp in imports if not imp.is_relative])
    return imports, dependencies


def _param_names(raw: str) -> list[str]:
    names = []
    for param in split_top_level(raw):
        name = param.split()[0]
        if name:
            names.append(name)
    return names


def _extract_functions(code: str) -> list[tuple[str | None, FunctionInfo]]:
    """Return (receiver type, info) pairs; the receiver is None for plain functions."""
    functions: list[tuple[str | None, FunctionInfo]] = []
    for match in FUNCTION_RE.finditer(code):
        _receiver, receiver_type, name, params, results, result = match.groups()
        return_type = results.strip() if results else result
        functions.append((receiver_type, FunctionInfo(
            name=name,
            params=_param_names(params),
            return_type=return_type or None,
            is_async=False,
            exported=_is_exported(name),
            line_number=line_number_at(code, match.start()),
        )))
    return functions


def _struct_fields(body: str) -> list[str]:
    fields: list[str] = []
    for match in FIELD_RE.finditer(body):
        fields.extend(n.strip() for n in match.group(1).split(","))
    fields.extend(m.group(1).split(".")[-1] for m in EMBEDDED_RE.finditer(body))
    return dedupe([f for f in fields if f])


def _extract_structs(code: str, functions: list[tuple[str | None, FunctionInfo]]) -> list[ClassInfo]:
    structs: list[ClassInfo] = []
    for match in STRUCT_RE.finditer(code):
        name = match.group(1)
        body = code[match.end():find_block_end(code, match.end())]
        structs.append(ClassInfo(
            name=name,
            methods=[info for receiver, info in functions if receiver == name],
            properties=_struct_fields(body),
            exported=_is_exported(name),
            line_number=line_number_at(code, match.start()),
        ))
    return structs


def analyze_go(code: str) -> CodeAnalysis:
    imports, dependencies = _extract_imports(code)
    functions = _extract_functions(code)
    return CodeAnalysis(
        language="go",
        functions=[info for _receiver, info in functions],
        classes=_extract_structs(code, functions),
        imports=imports,
        dependencies=dependencies,
        complexity=calculate_complexity(code),
        line_count=len(code.split("\n")),
    )
