# tests/classifier/test_patterns.py
"""Tests for the classifier pattern tables."""

from coursebook.classifier import CODE_PATTERNS, LANGUAGE_PATTERNS
from coursebook.classifier.patterns import matching_categories
from coursebook.models import Language


class TestLanguagePatterns:
    def test_priority_order(self):
        order = [language for language, _ in LANGUAGE_PATTERNS]
        assert order == [
            Language.JAVASCRIPT,
            Language.PYTHON,
            Language.HTML,
            Language.CSS,
            Language.SQL,
        ]

    def test_every_language_has_patterns(self):
        for _, patterns in LANGUAGE_PATTERNS:
            assert len(patterns) > 0


class TestMatchingCategories:
    def test_sql_only(self):
        assert matching_categories("SELECT * FROM t") == ["sql"]

    def test_python_function(self):
        assert matching_categories("def f():\n  return 1") == ["control_flow", "scripting"]

    def test_markup(self):
        assert "markup" in matching_categories("<p>Hello</p>")

    def test_async(self):
        assert "async" in matching_categories("await fetch(url)")

    def test_prose(self):
        assert matching_categories("A sentence about the weather.") == []

    def test_categories_follow_table_order(self):
        names = list(CODE_PATTERNS)
        found = matching_categories("import os\nclass A:\n    pass")
        assert found == sorted(found, key=names.index)

    def test_non_ascii_identifiers_do_not_match(self):
        assert matching_categories("const é = 1") == []
        assert matching_categories("let ñ = 2") == []
        assert "scripting" not in matching_categories("def ƒoo")

    def test_ascii_identifiers_still_match(self):
        assert matching_categories("const e = 1") == ["declarations"]


class TestAsciiLanguageDetection:
    def test_unicode_python_name_not_detected(self):
        python = dict(LANGUAGE_PATTERNS)[Language.PYTHON]
        assert not any(p.search("def ƒoo") for p in python)
        assert any(p.search("def foo") for p in python)
