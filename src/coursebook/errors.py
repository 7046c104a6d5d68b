"""Exceptions raised by the catalog, directory and session layers."""


class CoursebookError(Exception):
    """Base class for Coursebook errors."""


class NotFoundError(CoursebookError):
    """A record that was referenced by id does not exist."""


class ChapterNotFoundError(NotFoundError):
    def __init__(self, chapter_id: str) -> None:
        super().__init__(f"Chapter not found: {chapter_id}")
        self.chapter_id = chapter_id


class TutorialNotFoundError(NotFoundError):
    def __init__(self, tutorial_id: str) -> None:
        super().__init__(f"Tutorial not found: {tutorial_id}")
        self.tutorial_id = tutorial_id


class PracticeNotFoundError(NotFoundError):
    def __init__(self, practice_id: str) -> None:
        super().__init__(f"Practice section not found: {practice_id}")
        self.practice_id = practice_id


class ExamNotFoundError(NotFoundError):
    def __init__(self, exam_id: str) -> None:
        super().__init__(f"Exam section not found: {exam_id}")
        self.exam_id = exam_id


class UserNotFoundError(NotFoundError):
    def __init__(self, uid: str) -> None:
        super().__init__(f"User not found: {uid}")
        self.uid = uid


class DuplicateChapterError(CoursebookError):
    """Raised when creating a chapter whose title is already taken."""

    def __init__(self, title: str) -> None:
        super().__init__(f'Chapter "{title}" already exists')
        self.title = title


class LastAdminError(CoursebookError):
    """Raised when a role change would leave no admin."""

    def __init__(self, uid: str) -> None:
        super().__init__("Cannot remove the last admin user")
        self.uid = uid


class AuthenticationError(CoursebookError):
    """The auth provider rejected a credential."""


class PermissionDeniedError(CoursebookError):
    """The session is inactive or lacks the required role."""


class DuplicateUserError(CoursebookError):
    """Raised when registering a uid that already has a stored record."""

    def __init__(self, uid: str) -> None:
        super().__init__(f"User already registered: {uid}")
        self.uid = uid


class BackendUnavailableError(CoursebookError):
    """The configured storage backend could not be opened."""
