"""Storage abstractions for Coursebook."""

from coursebook.stores.base import ChapterStore, UserStore
from coursebook.stores.sqlite_chapter import SQLiteChapterStore
from coursebook.stores.sqlite_user import SQLiteUserStore

try:
    from coursebook.stores.firestore import FirestoreChapterStore, FirestoreUserStore
except ImportError:
    from coursebook._optional import _create_missing_dependency_class

    FirestoreChapterStore = _create_missing_dependency_class(  # type: ignore[misc,assignment]
        "FirestoreChapterStore", "firebase"
    )
    FirestoreUserStore = _create_missing_dependency_class(  # type: ignore[misc,assignment]
        "FirestoreUserStore", "firebase"
    )

__all__ = [
    "ChapterStore",
    "UserStore",
    "SQLiteChapterStore",
    "SQLiteUserStore",
    "FirestoreChapterStore",
    "FirestoreUserStore",
]
