"""Abstract base classes for storage."""

from abc import ABC, abstractmethod

from coursebook.models import Chapter, UserRecord


class ChapterStore(ABC):
    """Abstract base class for chapter storage.

    A chapter is stored as one document, with its tutorials, practice
    sections and exams embedded.
    """

    @abstractmethod
    def put(self, chapter: Chapter) -> None:
        """Store a chapter, overwriting if it exists."""
        ...

    @abstractmethod
    def get(self, chapter_id: str) -> Chapter | None:
        """Retrieve a chapter by ID. Returns None if not found."""
        ...

    @abstractmethod
    def delete(self, chapter_id: str) -> None:
        """Delete a chapter by ID."""
        ...

    @abstractmethod
    def list_chapters(self) -> list[Chapter]:
        """List all chapters ordered by their ``order`` field, then title."""
        ...

    @abstractmethod
    def find_by_title(self, title: str) -> list[Chapter]:
        """Get all chapters with exactly this title."""
        ...

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every chapter. Returns the number deleted."""
        ...

    @abstractmethod
    def count_chapters(self) -> int:
        """Count the total number of chapters in the store."""
        ...


class UserStore(ABC):
    """Abstract base class for user role storage, keyed by auth uid."""

    @abstractmethod
    def put(self, user: UserRecord) -> None:
        """Store a user, overwriting if it exists."""
        ...

    @abstractmethod
    def get(self, uid: str) -> UserRecord | None:
        """Retrieve a user by uid. Returns None if not found."""
        ...

    @abstractmethod
    def delete(self, uid: str) -> None:
        """Delete a user by uid."""
        ...

    @abstractmethod
    def list_users(self) -> list[UserRecord]:
        """List all users, oldest first."""
        ...

    @abstractmethod
    def count_users(self) -> int:
        """Count the total number of users."""
        ...

    @abstractmethod
    def count_admins(self) -> int:
        """Count users holding the admin role."""
        ...
