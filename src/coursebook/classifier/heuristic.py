"""Weighted-evidence classifier for stored answers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from coursebook.classifier.base import ContentClassifier
from coursebook.classifier.patterns import LANGUAGE_PATTERNS, matching_categories
from coursebook.models import AnswerKind, ClassificationResult, Language
from coursebook.settings import ClassifierWeights


@dataclass(frozen=True)
class StructuralSignals:
    """Punctuation and layout evidence, independent of the pattern tables."""

    multiline: bool
    indentation: bool
    braces: bool
    parentheses: bool
    semicolons: bool
    quotes: bool

    @classmethod
    def from_text(cls, text: str) -> StructuralSignals:
        lines = text.split("\n")
        return cls(
            multiline=len(lines) > 1,
            indentation=any(line.startswith(("  ", "\t")) for line in lines),
            braces="{" in text and "}" in text,
            parentheses="(" in text and ")" in text,
            semicolons=";" in text,
            quotes=any(q in text for q in ("\"", "'", "`")),
        )


class HeuristicClassifier(ContentClassifier):
    """Scores an answer against code idioms and structural signals.

    False positives (prose shown in a code block) are cheaper than false
    negatives, so the default threshold is low. The decision is
    ``score >= threshold``; a score equal to the threshold counts as code.

    Example:
        classifier = HeuristicClassifier()
        classifier.classify("def add(a, b):\\n    return a + b")
        # ClassificationResult(is_code=True, language=<Language.PYTHON: 'python'>, ...)
    """

    def __init__(
        self,
        weights: ClassifierWeights | None = None,
        default_language: Language = Language.JAVASCRIPT,
    ) -> None:
        self.weights = weights if weights is not None else ClassifierWeights()
        self.default_language = Language(default_language)

    def score(self, text: str | None, declared_kind: AnswerKind | str | None = None) -> float:
        """Weighted sum of the evidence found in ``text``."""
        if not text:
            return 0.0

        w = self.weights
        signals = StructuralSignals.from_text(text)

        score = 0.0
        if matching_categories(text):
            score += w.code_patterns
        if signals.multiline:
            score += w.multiline
        if signals.indentation:
            score += w.indentation
        if signals.braces:
            score += w.braces
        if signals.parentheses:
            score += w.parentheses
        if signals.semicolons:
            score += w.semicolons
        if signals.quotes:
            score += w.quotes
        if declared_kind == AnswerKind.CODE:
            score += w.declared_code
        return score

    def is_code(self, text: str | None, declared_kind: AnswerKind | str | None = None) -> bool:
        if not text:
            return False
        return self._meets_threshold(self.score(text, declared_kind))

    def detect_language(self, text: str | None) -> Language:
        """First language in priority order with a matching pattern."""
        if not text:
            return self.default_language
        for language, patterns in LANGUAGE_PATTERNS:
            if any(pattern.search(text) for pattern in patterns):
                return language
        return self.default_language

    def classify(
        self, text: str | None, declared_kind: AnswerKind | str | None = None
    ) -> ClassificationResult:
        if not text:
            return ClassificationResult(is_code=False, language=self.default_language)

        score = self.score(text, declared_kind)
        if not self._meets_threshold(score):
            return ClassificationResult(is_code=False, language=self.default_language, score=score)
        return ClassificationResult(is_code=True, language=self.detect_language(text), score=score)

    def _meets_threshold(self, score: float) -> bool:
        # 0.1 + 0.1 + 0.1 must still reach a 0.3 threshold
        threshold = self.weights.threshold
        return score >= threshold or math.isclose(score, threshold, abs_tol=1e-9)


_default = HeuristicClassifier()


def classify(
    text: str | None, declared_kind: AnswerKind | str | None = None
) -> ClassificationResult:
    """Classify with the default weight table."""
    return _default.classify(text, declared_kind)
