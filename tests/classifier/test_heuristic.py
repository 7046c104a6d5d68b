# tests/classifier/test_heuristic.py
"""Tests for the weighted-evidence answer classifier."""

import pytest

from coursebook.classifier import ContentClassifier, HeuristicClassifier, StructuralSignals, classify
from coursebook.models import AnswerKind, Language
from coursebook.settings import ClassifierWeights, Settings


@pytest.fixture
def classifier():
    return HeuristicClassifier()


class TestClassify:
    def test_is_content_classifier(self, classifier):
        assert isinstance(classifier, ContentClassifier)

    def test_python_function(self):
        result = classify("def add(a, b):\n    return a + b")
        assert result.is_code is True
        assert result.language == Language.PYTHON

    def test_plain_sentence_is_text(self):
        result = classify("The capital of France is Paris.")
        assert result.is_code is False
        assert result.language == Language.JAVASCRIPT

    def test_sql_statement(self):
        result = classify("SELECT * FROM users WHERE id = 1;")
        assert result.is_code is True
        assert result.language == Language.SQL

    @pytest.mark.parametrize("kind", [None, "text", "code", "image", "mixed"])
    def test_sql_regardless_of_declared_kind(self, kind):
        result = classify("SELECT * FROM users WHERE id = 1;", kind)
        assert result.is_code is True
        assert result.language == Language.SQL

    def test_lowercase_sql(self):
        result = classify("select name from users")
        assert result.is_code is True
        assert result.language == Language.SQL

    @pytest.mark.parametrize(
        "text",
        [
            "const x = 5;",
            "function greet(name) {\n  return 'Hi ' + name;\n}",
            "class Animal {\n  constructor() {}\n}",
            "import React from 'react';",
        ],
    )
    def test_javascript_declarations(self, text):
        result = classify(text)
        assert result.is_code is True
        assert result.language == Language.JAVASCRIPT

    def test_colon_class_is_python(self):
        result = classify("class Foo:\n    pass")
        assert result.is_code is True
        assert result.language == Language.PYTHON

    def test_html_wins_over_css(self):
        text = '<div class="box">\n.box { color: red; }\n</div>'
        result = classify(text)
        assert result.is_code is True
        assert result.language == Language.HTML

    def test_css_rule(self):
        result = classify(".title {\n  color: red;\n}")
        assert result.is_code is True
        assert result.language == Language.CSS

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_is_text(self, text):
        result = classify(text)
        assert result.is_code is False
        assert result.score == 0.0

    def test_empty_with_code_hint_is_text(self):
        assert classify("", AnswerKind.CODE).is_code is False

    def test_idempotent(self):
        text = "for (let i = 0; i < 3; i++) {\n  console.log(i);\n}"
        assert classify(text) == classify(text)


class TestThreshold:
    def test_declared_code_alone_reaches_threshold(self, classifier):
        assert classifier.score("hello world", AnswerKind.CODE) == pytest.approx(0.3)
        assert classifier.classify("hello world", AnswerKind.CODE).is_code is True

    def test_declared_kind_as_string(self, classifier):
        assert classifier.is_code("hello world", "code") is True

    def test_without_hint_stays_text(self, classifier):
        assert classifier.classify("hello world").is_code is False

    def test_three_small_signals_reach_threshold(self, classifier):
        # parentheses + semicolon + quotes, no pattern match
        text = "a (b) 'c';"
        assert classifier.score(text) == pytest.approx(0.3)
        assert classifier.is_code(text) is True

    def test_two_small_signals_stay_below(self, classifier):
        assert classifier.is_code("Hello (world);") is False

    def test_unmatched_code_uses_default_language(self, classifier):
        assert classifier.classify("a (b) 'c';").language == Language.JAVASCRIPT

    def test_custom_default_language(self):
        classifier = HeuristicClassifier(default_language=Language.PYTHON)
        assert classifier.classify("a (b) 'c';").language == Language.PYTHON
        assert classifier.classify("plain words").language == Language.PYTHON


class TestWeights:
    def test_strict_profile(self):
        classifier = HeuristicClassifier(Settings.with_profile("strict").classifier)
        assert classifier.is_code("a (b) 'c';") is False
        assert classifier.is_code("hello world", AnswerKind.CODE) is False
        assert classifier.is_code("const x = 5") is True

    def test_lenient_profile(self):
        classifier = HeuristicClassifier(Settings.with_profile("lenient").classifier)
        assert classifier.is_code("Hello (world);") is True
        assert classifier.score("hello", AnswerKind.CODE) == pytest.approx(0.5)

    def test_zero_pattern_weight(self):
        classifier = HeuristicClassifier(ClassifierWeights(code_patterns=0.0))
        assert classifier.is_code("const x = 5") is False

    def test_score_sums_every_signal(self, classifier):
        text = "function f() {\n\treturn \"x\";\n}"
        # patterns 0.6 + multiline 0.2 + indent, braces, parens, semicolon, quotes
        assert classifier.score(text) == pytest.approx(1.3)


class TestStructuralSignals:
    def test_all_present(self):
        signals = StructuralSignals.from_text("a\n\tb {x}; 'q' (y)")
        assert signals.multiline
        assert signals.indentation
        assert signals.braces
        assert signals.parentheses
        assert signals.semicolons
        assert signals.quotes

    def test_none_present(self):
        signals = StructuralSignals.from_text("just words")
        assert not any(
            [
                signals.multiline,
                signals.indentation,
                signals.braces,
                signals.parentheses,
                signals.semicolons,
                signals.quotes,
            ]
        )

    def test_braces_need_both_sides(self):
        assert StructuralSignals.from_text("{ open").braces is False

    def test_backtick_is_a_quote(self):
        assert StructuralSignals.from_text("use `ls`").quotes is True


class TestNonAsciiText:
    def test_unicode_declaration_is_text(self, classifier):
        assert classifier.classify("const é = 1").is_code is False
