"""Shared pytest fixtures."""

import os
import tempfile

import pytest

from coursebook.auth import AuthProvider
from coursebook.catalog import ChapterCatalog
from coursebook.directory import UserDirectory
from coursebook.errors import AuthenticationError
from coursebook.models import Identity
from coursebook.stores import SQLiteChapterStore, SQLiteUserStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory for stores."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def chapter_store(temp_dir):
    return SQLiteChapterStore(os.path.join(temp_dir, "chapters.db"))


@pytest.fixture
def user_store(temp_dir):
    return SQLiteUserStore(os.path.join(temp_dir, "users.db"))


@pytest.fixture
def catalog(chapter_store):
    return ChapterCatalog(chapter_store)


@pytest.fixture
def directory(user_store):
    return UserDirectory(user_store)


@pytest.fixture
def mock_auth_provider():
    """Auth provider that accepts tokens of the form ``uid:email``."""

    class MockAuthProvider(AuthProvider):
        """Mock provider; the token "bad" is always rejected."""

        def verify(self, credential: str) -> Identity:
            if credential == "bad" or ":" not in credential:
                raise AuthenticationError("Invalid token")
            uid, email = credential.split(":", 1)
            return Identity(uid=uid, email=email)

    return MockAuthProvider()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove COURSEBOOK_* variables so tests see defaults."""
    for key in list(os.environ):
        if key.startswith("COURSEBOOK_"):
            monkeypatch.delenv(key)
    return monkeypatch
