"""TypeScript/JavaScript structural extraction."""

from __future__ import annotations

import re

from docmuse.analysis.complexity import calculate_complexity
from docmuse.analysis.models import ClassInfo, CodeAnalysis, ExportInfo, FunctionInfo, ImportInfo
from docmuse.analysis.text import (
    dedupe,
    find_block_end,
    line_number_at,
    mask_nested_blocks,
    split_top_level,
)

IMPORT_RE = re.compile(
    r"import\s+(?:type\s+)?"
    r"(?:(\w+)\s*,?\s*)?"  # default import
    r"(?:\*\s+as\s+(\w+)\s*)?"  # namespace import
    r"(?:\{([^}]+)\})?"  # named imports
    r"\s*(?:from\s+)?['\"]([^'\"]+)['\"]"
)

FUNCTION_RE = re.compile(
    r"(?:(export)\s+)?(?:default\s+)?(?:(async)\s+)?function\s*\*?\s+(\w+)\s*(?:<[^>]+>)?\s*"
    r"\(([^)]*)\)(?:\s*:\s*([^\s{]+))?\s*\{"
)

ARROW_FUNCTION_RE = re.compile(
    r"(?:(export)\s+)?(?:const|let|var)\s+(\w+)\s*(?::\s*[^=]+)?\s*=\s*(?:(async)\s+)?"
    r"\(([^)]*)\)\s*(?::\s*([^\s=]+))?\s*=>"
)

CLASS_RE = re.compile(
    r"(?:(export)\s+)?(?:default\s+)?(?:abstract\s+)?class\s+(\w+)(?:\s*<[^>{]*>)?"
    r"(?:\s+extends\s+([\w.]+)(?:<[^>{]*>)?)?(?:\s+implements\s+([^{]+))?\s*\{"
)

METHOD_RE = re.compile(
    r"(?:(public|private|protected)\s+)?(?:(static)\s+)?(?:(async)\s+)?(\w+)\s*(?:<[^>]+>)?"
    r"\(([^)]*)\)(?:\s*:\s*([^{;]+?))?\s*\{"
)

PROPERTY_RE = re.compile(
    r"^[ \t]*(?:(?:public|private|protected|readonly|static|declare)\s+)*(\w+)[?!]?"
    r"\s*(?::\s*[^;=\n]+?)?\s*(?:=\s*[^;\n]+)?;",
    re.MULTILINE,
)

EXPORT_RE = re.compile(
    r"export\s+(?:(default)\s+)?(?:async\s+)?(?:abstract\s+)?"
    r"(const|let|var|function|class|type|interface|enum)\s+(\w+)"
)

# Control-flow keywords that look like method signatures in a class body
NOT_METHODS = {"constructor", "if", "for", "while", "switch", "catch"}


def _param_names(raw: str) -> list[str]:
    names = []
    for param in split_top_level(raw):
        name = param.split(":")[0].split("=")[0].strip().rstrip("?")
        if name:
            names.append(name)
    return names


def _dependency_root(source: str) -> str | None:
    if source.startswith(".") or source.startswith("@/"):
        return None
    return source.split("/")[0]


def _extract_imports(code: str) -> tuple[list[ImportInfo], list[str]]:
    imports: list[ImportInfo] = []
    dependencies: list[str] = []
    for match in IMPORT_RE.finditer(code):
        default_import, namespace, named, source = match.groups()
        names = [n.strip().split(" as ")[0].strip() for n in (named or "").split(",")]
        names = [n for n in names if n]
        if namespace:
            names.insert(0, namespace)
        if default_import:
            names.insert(0, default_import)
        imports.append(ImportInfo(
            source=source,
            names=names,
            is_default=bool(default_import),
            is_namespace=bool(namespace),
        ))
        root = _dependency_root(source)
        if root:
            dependencies.append(root)
    return imports, dedupe(dependencies)


def _extract_functions(code: str) -> list[FunctionInfo]:
    found: list[tuple[int, FunctionInfo]] = []
    for match in FUNCTION_RE.finditer(code):
        exported, is_async, name, params, return_type = match.groups()
        found.append((match.start(), FunctionInfo(
            name=name,
            params=_param_names(params),
            return_type=return_type,
            is_async=bool(is_async),
            exported=bool(exported),
            line_number=line_number_at(code, match.start()),
        )))
    for match in ARROW_FUNCTION_RE.finditer(code):
        exported, name, is_async, params, return_type = match.groups()
        found.append((match.start(), FunctionInfo(
            name=name,
            params=_param_names(params),
            return_type=return_type,
            is_async=bool(is_async),
            exported=bool(exported),
            line_number=line_number_at(code, match.start()),
        )))
    found.sort(key=lambda item: item[0])
    return [info for _offset, info in found]


def _extract_classes(code: str) -> list[ClassInfo]:
    classes: list[ClassInfo] = []
    for match in CLASS_RE.finditer(code):
        exported, name, parent, implements = match.groups()
        body_start = match.end()
        body = code[body_start:find_block_end(code, body_start)]
        top_level = mask_nested_blocks(body)

        methods: list[FunctionInfo] = []
        for m in METHOD_RE.finditer(top_level):
            _visibility, _static, is_async, method_name, params, return_type = m.groups()
            if method_name in NOT_METHODS:
                continue
            methods.append(FunctionInfo(
                name=method_name,
                params=_param_names(params),
                return_type=return_type.strip() if return_type else None,
                is_async=bool(is_async),
                exported=False,
                line_number=line_number_at(code, body_start + m.start(4)),
            ))

        properties = dedupe([m.group(1) for m in PROPERTY_RE.finditer(top_level)])

        classes.append(ClassInfo(
            name=name,
            methods=methods,
            properties=properties,
            extends=parent,
            implements=split_top_level(implements) if implements else [],
            exported=bool(exported),
            line_number=line_number_at(code, match.start()),
        ))
    return classes


def _extract_exports(code: str) -> list[ExportInfo]:
    return [
        ExportInfo(name=m.group(3), kind=m.group(2), is_default=bool(m.group(1)))
        for m in EXPORT_RE.finditer(code)
    ]


def analyze_typescript(code: str, language: str = "typescript") -> CodeAnalysis:
    imports, dependencies = _extract_imports(code)
    return CodeAnalysis(
        language=language,
        functions=_extract_functions(code),
        classes=_extract_classes(code),
        imports=imports,
        exports=_extract_exports(code),
        dependencies=dependencies,
        complexity=calculate_complexity(code),
        line_count=len(code.split("\n")),
    )
