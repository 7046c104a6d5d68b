"""Data models for Coursebook."""

from coursebook.models.chapter import Chapter, Tutorial
from coursebook.models.classification import ClassificationResult, Language
from coursebook.models.exam import ExamResult, ExamSection
from coursebook.models.practice import AnswerKind, PracticeSection
from coursebook.models.user import Identity, Role, UserRecord

__all__ = [
    "AnswerKind",
    "Chapter",
    "ClassificationResult",
    "ExamResult",
    "ExamSection",
    "Identity",
    "Language",
    "PracticeSection",
    "Role",
    "Tutorial",
    "UserRecord",
]
