"""Coursebook - course content and access for a small learning site.

Chapters hold tutorials, practice sections and exams. Practice answers are
shown as code or prose depending on a heuristic content classifier.

Quick Start (Local Storage):
    from coursebook import Coursebook, LocalStorage

    book = Coursebook(storage=LocalStorage("./coursebook_data"))
    book.catalog.create_default_chapters()

    chapter = book.catalog.list_chapters()[0]
    practice = book.catalog.add_practice(
        chapter.id,
        title="Loops",
        questions=["Print 1 to 3"],
        answers=["for i in range(1, 4):\\n    print(i)"],
    )
    view = book.render_answer(practice)  # mode="code", language=python

Classifier only:
    from coursebook import classify

    classify("SELECT * FROM users").language  # Language.SQL
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("coursebook")
except PackageNotFoundError:
    # Source-tree fallback when the distribution is not installed.
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    found = data.get("project", {}).get("version")
                    return str(found) if found is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except (OSError, ValueError):
        __version__ = "unknown"

# Authentication
from coursebook.auth import AuthProvider, FirebaseAuthProvider, Session, SessionManager

# Services
from coursebook.catalog import DEFAULT_CHAPTERS, ChapterCatalog

# Classification
from coursebook.classifier import ContentClassifier, HeuristicClassifier, classify

# Configuration objects
from coursebook.configuration import FirebaseStorage, LocalStorage, StorageConfig

# Central configuration
from coursebook.coursebook import Coursebook
from coursebook.directory import UserDirectory
from coursebook.errors import (
    AuthenticationError,
    BackendUnavailableError,
    ChapterNotFoundError,
    CoursebookError,
    DuplicateChapterError,
    DuplicateUserError,
    LastAdminError,
    NotFoundError,
    PermissionDeniedError,
)
from coursebook.models import (
    AnswerKind,
    Chapter,
    ClassificationResult,
    ExamResult,
    ExamSection,
    Identity,
    Language,
    PracticeSection,
    Role,
    Tutorial,
    UserRecord,
)
from coursebook.rendering import AnswerView, embed_url, render_answer, youtube_video_id
from coursebook.settings import ClassifierWeights, Settings

# Storage
from coursebook.stores import (
    ChapterStore,
    FirestoreChapterStore,
    FirestoreUserStore,
    SQLiteChapterStore,
    SQLiteUserStore,
    UserStore,
)

__all__ = [
    # Version
    "__version__",
    # Models
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
    # Config
    "ClassifierWeights",
    "Settings",
    # Configuration objects
    "StorageConfig",
    "LocalStorage",
    "FirebaseStorage",
    # Storage
    "ChapterStore",
    "UserStore",
    "SQLiteChapterStore",
    "SQLiteUserStore",
    "FirestoreChapterStore",
    "FirestoreUserStore",
    # Classification
    "ContentClassifier",
    "HeuristicClassifier",
    "classify",
    # Services
    "DEFAULT_CHAPTERS",
    "ChapterCatalog",
    "UserDirectory",
    # Authentication
    "AuthProvider",
    "FirebaseAuthProvider",
    "Session",
    "SessionManager",
    # Rendering
    "AnswerView",
    "embed_url",
    "render_answer",
    "youtube_video_id",
    # Errors
    "AuthenticationError",
    "BackendUnavailableError",
    "ChapterNotFoundError",
    "CoursebookError",
    "DuplicateChapterError",
    "DuplicateUserError",
    "LastAdminError",
    "NotFoundError",
    "PermissionDeniedError",
    # Central configuration
    "Coursebook",
]
