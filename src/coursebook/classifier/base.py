"""Content classifier abstract base class."""

from abc import ABC, abstractmethod

from coursebook.models import AnswerKind, ClassificationResult


class ContentClassifier(ABC):
    """Decides whether an answer string renders as prose or as code."""

    @abstractmethod
    def classify(
        self, text: str | None, declared_kind: AnswerKind | str | None = None
    ) -> ClassificationResult:
        """Classify ``text``. Must never raise."""
        ...
