"""Answer content classification."""

from coursebook.classifier.base import ContentClassifier
from coursebook.classifier.heuristic import HeuristicClassifier, StructuralSignals, classify
from coursebook.classifier.patterns import CODE_PATTERNS, LANGUAGE_PATTERNS

__all__ = [
    "CODE_PATTERNS",
    "LANGUAGE_PATTERNS",
    "ContentClassifier",
    "HeuristicClassifier",
    "StructuralSignals",
    "classify",
]
