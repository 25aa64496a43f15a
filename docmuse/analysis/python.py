"""Python structural extraction."""

from __future__ import annotations

import keyword
import re

from docmuse.analysis.complexity import calculate_complexity
from docmuse.analysis.models import ClassInfo, CodeAnalysis, FunctionInfo, ImportInfo
from docmuse.analysis.text import dedupe, line_number_at, split_top_level

IMPORT_RE = re.compile(
    r"^[ \t]*(?:from[ \t]+(\S+)[ \t]+)?import[ \t]+(\([^)]*\)|.+)",
    re.MULTILINE,
)

FUNCTION_RE = re.compile(
    r"^([ \t]*)(?:(async)\s+)?def\s+(\w+)\s*\(([^)]*)\)(?:\s*->\s*([^:]+?))?\s*:",
    re.MULTILINE,
)

CLASS_RE = re.compile(r"^class\s+(\w+)\s*(?:\(([^)]*)\))?\s*:", re.MULTILINE)

DOCSTRING_RE = re.compile(r"\s*(?:\"\"\"(.*?)\"\"\"|'''(.*?)''')", re.DOTALL)

SELF_ATTRIBUTE_RE = re.compile(r"\bself\.(\w+)\s*(?::[^=\n]+)?=(?!=)")

COMMENT_RE = re.compile(r"#.*")

CLASS_ATTRIBUTE_RE = re.compile(r"(\w+)\s*(?::\s*\S|=(?!=))")

PYTHON_KEYWORDS = frozenset(keyword.kwlist)


def _import_names(raw: str) -> list[str]:
    raw = COMMENT_RE.sub("", raw).strip().strip("()")
    names = [n.strip().split(" as ")[0].strip() for n in raw.split(",")]
    return [n for n in names if n]


def _extract_imports(code: str) -> tuple[list[ImportInfo], list[str]]:
    imports: list[ImportInfo] = []
    dependencies: list[str] = []
    for match in IMPORT_RE.finditer(code):
        module, raw_names = match.groups()
        names = _import_names(raw_names)
        if module:
            imports.append(ImportInfo(source=module, names=names, is_default=False))
            sources = [module]
        else:
            # "import a, b" imports two modules
            imports.extend(ImportInfo(source=n, names=[n], is_default=True) for n in names)
            sources = names
        for source in sources:
            if not source.startswith("."):
                dependencies.append(source.split(".")[0])
    return imports, dedupe(dependencies)


def _param_names(raw: str) -> list[str]:
    names = []
    for param in split_top_level(COMMENT_RE.sub("", raw)):
        name = param.split(":")[0].split("=")[0].strip()
        if name and name not in ("*", "/"):
            names.append(name)
    return names


def _extract_functions(code: str) -> list[tuple[int, FunctionInfo]]:
    """Return (indent, info) pairs for every def, methods included."""
    functions: list[tuple[int, FunctionInfo]] = []
    for match in FUNCTION_RE.finditer(code):
        indent, is_async, name, params, return_type = match.groups()
        doc_match = DOCSTRING_RE.match(code, match.end())
        docstring = None
        if doc_match:
            docstring = (doc_match.group(1) or doc_match.group(2) or "").strip()
        functions.append((len(indent), FunctionInfo(
            name=name,
            params=_param_names(params),
            return_type=return_type.strip() if return_type else None,
            is_async=bool(is_async),
            exported=len(indent) == 0 and not name.startswith("_"),
            line_number=line_number_at(code, match.start()),
            docstring=docstring,
        )))
    return functions


def _block_end_line(lines: list[str], start: int, indent: int) -> int:
    """Index of the first line after ``start`` that dedents to ``indent`` or less."""
    for i in range(start + 1, len(lines)):
        line = lines[i]
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        if len(line) - len(line.lstrip()) <= indent:
            return i
    return len(lines)


def _class_properties(body_lines: list[str]) -> list[str]:
    """Class-level assignments/annotations plus ``self.x = ...`` attributes."""
    properties: list[str] = []
    body_indent = None
    in_string = False
    for line in body_lines:
        stripped = line.strip()
        quotes = stripped.count('"""') + stripped.count("'''")
        if in_string or quotes:
            if quotes % 2 == 1:
                in_string = not in_string
            continue
        if not stripped or stripped.startswith(("#", "@")):
            continue
        indent = len(line) - len(line.lstrip())
        if body_indent is None:
            body_indent = indent
        if indent != body_indent:
            continue
        attr = CLASS_ATTRIBUTE_RE.match(stripped)
        if attr and attr.group(1) not in PYTHON_KEYWORDS:
            properties.append(attr.group(1))
    properties.extend(SELF_ATTRIBUTE_RE.findall("\n".join(body_lines)))
    return dedupe(properties)


def _extract_classes(code: str, functions: list[tuple[int, FunctionInfo]]) -> list[ClassInfo]:
    lines = code.split("\n")
    classes: list[ClassInfo] = []
    for match in CLASS_RE.finditer(code):
        name, bases = match.groups()
        start_line = line_number_at(code, match.start())
        # the header may span lines: class A(\n    Base,\n):
        header_line = line_number_at(code, match.end())
        end_line = _block_end_line(lines, header_line - 1, 0)

        parents = [b for b in split_top_level(bases or "") if "=" not in b]

        # Direct methods only: the shallowest defs inside the class block
        nested = [
            (fn_indent, info) for fn_indent, info in functions
            if start_line < info.line_number <= end_line and fn_indent > 0
        ]
        method_indent = min((fn_indent for fn_indent, _info in nested), default=0)
        methods = [info for fn_indent, info in nested if fn_indent == method_indent]

        classes.append(ClassInfo(
            name=name,
            methods=methods,
            properties=_class_properties(lines[header_line:end_line]),
            extends=parents[0] if parents else None,
            implements=parents[1:],
            exported=not name.startswith("_"),
            line_number=start_line,
        ))
    return classes


def analyze_python(code: str) -> CodeAnalysis:
    imports, dependencies = _extract_imports(code)
    functions = _extract_functions(code)
    return CodeAnalysis(
        language="python",
        functions=[info for _indent, info in functions],
        classes=_extract_classes(code, functions),
        imports=imports,
        dependencies=dependencies,
        complexity=calculate_complexity(code),
        line_count=len(code.split("\n")),
    )
