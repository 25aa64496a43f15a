"""Data models for structural source-code analysis."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FunctionInfo:
    name: str
    params: list[str] = field(default_factory=list)  # Names only, types/defaults stripped
    return_type: str | None = None
    is_async: bool = False
    exported: bool = False
    line_number: int = 1  # 1-based
    docstring: str | None = None  # Python only

    def to_dict(self) -> dict:
        data = {
            "name": self.name,
            "params": list(self.params),
            "returnType": self.return_type,
            "async": self.is_async,
            "exported": self.exported,
            "lineNumber": self.line_number,
        }
        if self.docstring is not None:
            data["docstring"] = self.docstring
        return data


@dataclass
class ClassInfo:
    name: str
    methods: list[FunctionInfo] = field(default_factory=list)
    properties: list[str] = field(default_factory=list)
    extends: str | None = None
    implements: list[str] = field(default_factory=list)
    exported: bool = False
    line_number: int = 1

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "methods": [m.to_dict() for m in self.methods],
            "properties": list(self.properties),
            "extends": self.extends,
            "implements": list(self.implements),
            "exported": self.exported,
            "lineNumber": self.line_number,
        }


@dataclass
class ImportInfo:
    source: str  # Module path as written
    names: list[str] = field(default_factory=list)
    is_default: bool = False
    is_namespace: bool = False

    @property
    def is_relative(self) -> bool:
        return self.source.startswith(".")

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "imports": list(self.names),
            "isDefault": self.is_default,
            "isNamespace": self.is_namespace,
        }


@dataclass
class ExportInfo:
    name: str
    kind: str  # "const" | "let" | "var" | "function" | "class" | "type" | "interface"
    is_default: bool = False

    def to_dict(self) -> dict:
        return {"name": self.name, "type": self.kind, "isDefault": self.is_default}


@dataclass
class CodeAnalysis:
    language: str  # "typescript" | "javascript" | "python" | "go" | "unknown"
    functions: list[FunctionInfo] = field(default_factory=list)
    classes: list[ClassInfo] = field(default_factory=list)
    imports: list[ImportInfo] = field(default_factory=list)
    exports: list[ExportInfo] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)  # Root package names, deduplicated
    complexity: int = 1
    line_count: int = 0

    def to_dict(self) -> dict:
        return {
            "language": self.language,
            "functions": [f.to_dict() for f in self.functions],
            "classes": [c.to_dict() for c in self.classes],
            "imports": [i.to_dict() for i in self.imports],
            "exports": [e.to_dict() for e in self.exports],
            "dependencies": list(self.dependencies),
            "complexity": self.complexity,
            "lineCount": self.line_count,
        }
