# src/coursebook/coursebook.py
"""Central configuration class for Coursebook."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from coursebook.auth import AuthProvider, SessionManager
    from coursebook.configuration import StorageConfig
    from coursebook.models import PracticeSection
    from coursebook.rendering import AnswerView
    from coursebook.stores import ChapterStore, UserStore

from coursebook.catalog import ChapterCatalog
from coursebook.classifier import HeuristicClassifier
from coursebook.directory import UserDirectory
from coursebook.settings import Settings


class Coursebook:
    """Bundles the stores, settings and classifier of one deployment.

    There are two ways to create a Coursebook:

    1. With a storage bundle:

        from coursebook import Coursebook, LocalStorage

        book = Coursebook(storage=LocalStorage("./coursebook_data"))
        chapter = book.catalog.create_chapter("Chapter 1", order=1)

    2. With explicit stores:

        from coursebook.stores import SQLiteChapterStore, SQLiteUserStore

        book = Coursebook.from_stores(
            chapter_store=SQLiteChapterStore("./data/chapters.db"),
            user_store=SQLiteUserStore("./data/users.db"),
        )
    """

    def __init__(
        self,
        *,
        storage: StorageConfig | None = None,
        chapter_store: ChapterStore | None = None,
        user_store: UserStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Create a Coursebook.

        Args:
            storage: Storage bundle. Mutually exclusive with explicit stores.
            chapter_store: Explicit chapter store (use with user_store).
            user_store: Explicit user store (use with chapter_store).
            settings: Behavioral settings; defaults apply when omitted.

        Raises:
            ValueError: If neither a bundle nor both explicit stores are given,
                or if both are given.
        """
        self.settings = settings if settings is not None else Settings()

        if storage is not None:
            if chapter_store is not None or user_store is not None:
                raise ValueError("Cannot mix 'storage' bundle with explicit stores")
            self.chapter_store, self.user_store = storage.build_stores()
        elif chapter_store is not None and user_store is not None:
            self.chapter_store = chapter_store
            self.user_store = user_store
        else:
            raise ValueError(
                "Must provide either 'storage' bundle or both explicit stores "
                "(chapter_store, user_store)"
            )

        self.catalog = ChapterCatalog(
            self.chapter_store,
            default_time_limit=self.settings.default_time_limit,
            default_passing_score=self.settings.default_passing_score,
        )
        self.directory = UserDirectory(self.user_store)
        self.classifier = HeuristicClassifier(
            weights=self.settings.classifier,
            default_language=self.settings.default_language,
        )

    @classmethod
    def from_stores(
        cls,
        *,
        chapter_store: ChapterStore,
        user_store: UserStore,
        settings: Settings | None = None,
    ) -> Coursebook:
        """Create a Coursebook with explicit stores."""
        return cls(chapter_store=chapter_store, user_store=user_store, settings=settings)

    def sessions(self, provider: AuthProvider) -> SessionManager:
        """Create a session manager backed by this deployment's users."""
        from coursebook.auth import SessionManager

        return SessionManager(provider, self.directory)

    def render_answer(self, practice: PracticeSection) -> AnswerView:
        """Display decision for a practice answer, using the configured weights."""
        from coursebook.rendering import render_answer

        return render_answer(practice, self.classifier)
