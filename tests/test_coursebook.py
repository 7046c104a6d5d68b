# tests/test_coursebook.py
"""Tests for the central Coursebook class."""

import pytest

from coursebook import Coursebook, LocalStorage, Settings, __version__
from coursebook.models import Language, PracticeSection


class TestConstruction:
    def test_with_storage_bundle(self, temp_dir):
        book = Coursebook(storage=LocalStorage(temp_dir))
        assert book.catalog.list_chapters() == []
        assert book.directory.list_users() == []

    def test_from_stores(self, chapter_store, user_store):
        book = Coursebook.from_stores(chapter_store=chapter_store, user_store=user_store)
        assert book.chapter_store is chapter_store
        assert book.user_store is user_store

    def test_mixing_bundle_and_stores(self, temp_dir, chapter_store):
        with pytest.raises(ValueError, match="Cannot mix"):
            Coursebook(storage=LocalStorage(temp_dir), chapter_store=chapter_store)

    def test_missing_store(self, chapter_store):
        with pytest.raises(ValueError, match="Must provide"):
            Coursebook(chapter_store=chapter_store)

    def test_default_settings(self, temp_dir):
        assert Coursebook(storage=LocalStorage(temp_dir)).settings == Settings()

    def test_version(self):
        assert __version__ != ""


class TestSettingsFlowThrough:
    def test_classifier_uses_settings(self, temp_dir):
        settings = Settings.with_profile("strict", default_language=Language.PYTHON)
        book = Coursebook(storage=LocalStorage(temp_dir), settings=settings)
        assert book.classifier.weights.threshold == 0.6
        assert book.classifier.default_language == Language.PYTHON

    def test_exam_defaults_use_settings(self, temp_dir):
        settings = Settings(default_time_limit=15, default_passing_score=80)
        book = Coursebook(storage=LocalStorage(temp_dir), settings=settings)
        chapter = book.catalog.create_chapter("C")
        exam = book.catalog.add_exam(
            chapter.id, title="Q", questions=["q"], options=[["a"]], correct_answers=[0]
        )
        assert exam.time_limit == 15
        assert exam.passing_score == 80

    def test_render_answer_uses_configured_weights(self, temp_dir):
        practice = PracticeSection(title="Q", answers=["hello world"], answer_kind="code")
        default_book = Coursebook(storage=LocalStorage(temp_dir))
        strict_book = Coursebook(
            storage=LocalStorage(temp_dir), settings=Settings.with_profile("strict")
        )
        assert default_book.render_answer(practice).mode == "code"
        assert strict_book.render_answer(practice).mode == "text"


class TestSessions:
    def test_sessions_share_directory(self, temp_dir, mock_auth_provider):
        book = Coursebook(storage=LocalStorage(temp_dir))
        session = book.sessions(mock_auth_provider).sign_in("ann:ann@example.com")
        assert session.is_admin
        assert book.directory.is_admin("ann")
