# src/coursebook/stores/firestore.py
"""Cloud Firestore store implementations.

Requires the firebase extra: pip install coursebook[firebase]
"""

from __future__ import annotations

from typing import Any

from firebase_admin import firestore
from google.auth.exceptions import GoogleAuthError
from google.cloud.firestore_v1.base_query import FieldFilter

from coursebook._firebase import get_firebase_app
from coursebook.errors import BackendUnavailableError
from coursebook.models import Chapter, Role, UserRecord
from coursebook.stores.base import ChapterStore, UserStore


def _client(client: Any, credentials_path: str | None) -> Any:
    if client is not None:
        return client
    try:
        return firestore.client(get_firebase_app(credentials_path))
    except (GoogleAuthError, ValueError, OSError) as e:
        raise BackendUnavailableError(f"Cannot open Firestore: {e}") from e


class FirestoreChapterStore(ChapterStore):
    """Chapters kept as documents in a Firestore collection."""

    def __init__(
        self,
        collection: str = "chapters",
        client: Any = None,
        credentials_path: str | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            collection: Firestore collection name
            client: Existing ``google.cloud.firestore.Client`` (optional)
            credentials_path: Service account JSON, used when no client is given
        """
        self._collection = _client(client, credentials_path).collection(collection)

    def put(self, chapter: Chapter) -> None:
        self._collection.document(chapter.id).set(chapter.model_dump(mode="json"))

    def get(self, chapter_id: str) -> Chapter | None:
        snapshot = self._collection.document(chapter_id).get()
        if not snapshot.exists:
            return None
        return self._from_snapshot(snapshot)

    def delete(self, chapter_id: str) -> None:
        self._collection.document(chapter_id).delete()

    def list_chapters(self) -> list[Chapter]:
        chapters = [self._from_snapshot(s) for s in self._collection.order_by("order").stream()]
        return sorted(chapters, key=lambda c: (c.order, c.title))

    def find_by_title(self, title: str) -> list[Chapter]:
        snapshots = self._collection.where(filter=FieldFilter("title", "==", title)).stream()
        return sorted((self._from_snapshot(s) for s in snapshots), key=lambda c: c.order)

    def delete_all(self) -> int:
        deleted = 0
        for snapshot in self._collection.stream():
            snapshot.reference.delete()
            deleted += 1
        return deleted

    def count_chapters(self) -> int:
        return sum(1 for _ in self._collection.stream())

    @staticmethod
    def _from_snapshot(snapshot: Any) -> Chapter:
        return Chapter.model_validate({**snapshot.to_dict(), "id": snapshot.id})


class FirestoreUserStore(UserStore):
    """User roles kept as documents keyed by auth uid."""

    def __init__(
        self,
        collection: str = "users",
        client: Any = None,
        credentials_path: str | None = None,
    ) -> None:
        self._collection = _client(client, credentials_path).collection(collection)

    def put(self, user: UserRecord) -> None:
        self._collection.document(user.uid).set(user.model_dump(mode="json"))

    def get(self, uid: str) -> UserRecord | None:
        snapshot = self._collection.document(uid).get()
        if not snapshot.exists:
            return None
        return UserRecord.model_validate({**snapshot.to_dict(), "uid": snapshot.id})

    def delete(self, uid: str) -> None:
        self._collection.document(uid).delete()

    def list_users(self) -> list[UserRecord]:
        users = [
            UserRecord.model_validate({**s.to_dict(), "uid": s.id})
            for s in self._collection.stream()
        ]
        return sorted(users, key=lambda u: (u.created_at, u.uid))

    def count_users(self) -> int:
        return sum(1 for _ in self._collection.stream())

    def count_admins(self) -> int:
        query = self._collection.where(filter=FieldFilter("role", "==", Role.ADMIN.value))
        return sum(1 for _ in query.stream())
