"""Tests for docmuse.analysis.analyzer, complexity and text helpers."""

from __future__ import annotations

import pytest

from docmuse.analysis.analyzer import analyze_source_structure, detect_source_language
from docmuse.analysis.complexity import calculate_complexity
from docmuse.analysis.text import find_block_end, line_number_at, mask_nested_blocks, split_top_level


class TestDetectSourceLanguage:
    def test_typescript(self, typescript_source):
        assert detect_source_language(typescript_source) == "typescript"

    def test_typescript_by_annotation(self):
        assert detect_source_language("let count: number = 0;") == "typescript"

    def test_python(self, python_source):
        assert detect_source_language(python_source) == "python"

    def test_go(self, go_source):
        assert detect_source_language(go_source) == "go"

    def test_javascript(self):
        assert detect_source_language("function add(a,b){return a+b;}") == "javascript"
        assert detect_source_language("const x = 1;") == "javascript"

    def test_unknown(self):
        assert detect_source_language("SELECT * FROM users;") == "unknown"


class TestAnalyzeSourceStructure:
    def test_detected_javascript(self):
        analysis = analyze_source_structure("function add(a,b){return a+b;}")
        assert analysis.language == "javascript"
        assert analysis.complexity == 1
        assert len(analysis.functions) == 1
        assert analysis.functions[0].name == "add"

    def test_explicit_python(self):
        analysis = analyze_source_structure(
            "import os\nimport sys\ndef f():\n    if True:\n        pass",
            language="python",
        )
        assert "os" in analysis.dependencies
        assert "sys" in analysis.dependencies
        assert analysis.complexity == 2
        assert analysis.line_count == 5

    def test_language_is_case_insensitive(self):
        assert analyze_source_structure("x = 1", language="Python").language == "python"

    def test_unsupported_language(self):
        analysis = analyze_source_structure("fn main() { if x { } }", language="rust")
        assert analysis.language == "rust"
        assert analysis.functions == []
        assert analysis.classes == []
        assert analysis.imports == []
        assert analysis.complexity == 2

    def test_empty_code(self):
        analysis = analyze_source_structure("")
        assert analysis.language == "unknown"
        assert analysis.complexity == 1
        assert analysis.line_count == 1

    @pytest.mark.parametrize("fixture", ["typescript_source", "python_source", "go_source"])
    def test_relative_imports_never_dependencies(self, fixture, request):
        analysis = analyze_source_structure(request.getfixturevalue(fixture))
        for dep in analysis.dependencies:
            assert not dep.startswith(".")


class TestCalculateComplexity:
    def test_floor(self):
        assert calculate_complexity("") == 1
        assert calculate_complexity("x = 1") == 1

    def test_counts_each_token(self):
        code = "if (a && b || c) { } else if (d) { } while (e) { }"
        # if, if, else if, while, &&, ||
        assert calculate_complexity(code) == 7

    def test_switch_and_catch(self):
        code = "switch (x) { case 1: break; case 2: break; }\ntry { } catch (e) { }"
        # two cases, one catch
        assert calculate_complexity(code) == 4

    def test_ternary(self):
        assert calculate_complexity("const y = x ? 1 : 2;") == 2

    def test_multiline_ternary(self):
        assert calculate_complexity("const y = x\n  ? 1\n  : 2;") == 2

    def test_ternaries_on_one_line_count_once(self):
        assert calculate_complexity("const y = a ? b : c ? d : e;") == 2

    def test_long_whitespace_after_question_mark(self):
        assert calculate_complexity("?" + " " * 3000) == 1


class TestTextHelpers:
    def test_line_number_at(self):
        code = "a\nb\nc"
        assert line_number_at(code, 0) == 1
        assert line_number_at(code, 2) == 2
        assert line_number_at(code, 4) == 3

    def test_split_top_level(self):
        assert split_top_level("a: dict[str, int], b: Map<K, V>, c") == [
            "a: dict[str, int]",
            "b: Map<K, V>",
            "c",
        ]

    def test_find_block_end(self):
        code = "{ a { b } c } d"
        assert find_block_end(code, 1) == 12

    def test_find_block_end_unclosed(self):
        assert find_block_end("{ a { b", 1) == 7

    def test_mask_nested_blocks(self):
        body = "x;\nm() {\n  y;\n}\n"
        masked = mask_nested_blocks(body)
        assert len(masked) == len(body)
        assert "y" not in masked
        assert masked.count("\n") == body.count("\n")
