"""Storage configurations."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from coursebook.stores import ChapterStore, UserStore

CHAPTERS_DB = "chapters.db"
USERS_DB = "users.db"


@dataclass(frozen=True)
class LocalStorage:
    """SQLite storage under one directory.

    Files created in ``data_dir``:
    - chapters.db: chapter documents with their embedded content
    - users.db: user roles and profiles

    Args:
        data_dir: Base directory, created if missing.
    """

    data_dir: str

    def build_stores(self) -> tuple[ChapterStore, UserStore]:
        from coursebook.stores import SQLiteChapterStore, SQLiteUserStore

        Path(self.data_dir).mkdir(parents=True, exist_ok=True)
        return (
            SQLiteChapterStore(os.path.join(self.data_dir, CHAPTERS_DB)),
            SQLiteUserStore(os.path.join(self.data_dir, USERS_DB)),
        )


@dataclass(frozen=True)
class FirebaseStorage:
    """Cloud Firestore storage (``chapters`` and ``users`` collections).

    Requires the firebase extra: pip install coursebook[firebase]

    Args:
        credentials_path: Service account JSON. Application default
            credentials are used when omitted.
    """

    credentials_path: str | None = None
    chapters_collection: str = "chapters"
    users_collection: str = "users"

    def build_stores(self) -> tuple[ChapterStore, UserStore]:
        """Open both collections.

        Raises:
            BackendUnavailableError: If the firebase extra is missing or the
                credentials cannot be loaded.
        """
        from coursebook.errors import BackendUnavailableError
        from coursebook.stores import FirestoreChapterStore, FirestoreUserStore

        try:
            return (
                FirestoreChapterStore(
                    self.chapters_collection, credentials_path=self.credentials_path
                ),
                FirestoreUserStore(self.users_collection, credentials_path=self.credentials_path),
            )
        except ImportError as e:
            raise BackendUnavailableError(str(e)) from e
