# tests/test_optional.py
"""Tests for optional-dependency placeholders."""

import pytest

from coursebook._optional import _create_missing_dependency_class


class TestMissingDependencyClass:
    def test_keeps_name(self):
        placeholder = _create_missing_dependency_class("FirestoreChapterStore", "firebase")
        assert placeholder.__name__ == "FirestoreChapterStore"

    def test_instantiation_names_the_extra(self):
        placeholder = _create_missing_dependency_class("FirestoreChapterStore", "firebase")
        with pytest.raises(ImportError, match=r"coursebook\[firebase\]"):
            placeholder()

    def test_accepts_any_arguments_before_failing(self):
        placeholder = _create_missing_dependency_class("FirebaseAuthProvider", "firebase")
        with pytest.raises(ImportError):
            placeholder("creds.json", check_revoked=True)


class TestFirebaseExtra:
    def test_missing_extra_is_backend_error(self, monkeypatch):
        import coursebook.stores
        from coursebook.configuration import FirebaseStorage
        from coursebook.errors import BackendUnavailableError

        placeholder = _create_missing_dependency_class("FirestoreChapterStore", "firebase")
        monkeypatch.setattr(coursebook.stores, "FirestoreChapterStore", placeholder)

        with pytest.raises(BackendUnavailableError, match=r"coursebook\[firebase\]"):
            FirebaseStorage().build_stores()

    def test_dev_extra_installs_firebase(self):
        import tomllib
        from pathlib import Path

        pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
        extras = tomllib.loads(pyproject.read_text(encoding="utf-8"))["project"]["optional-dependencies"]
        dev = " ".join(extras["dev"])
        for requirement in extras["firebase"]:
            assert requirement in dev
