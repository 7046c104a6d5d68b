# tests/commands/conftest.py
"""Shared fixtures for command tests."""

import os

import pytest

from coursebook.configuration import FirebaseStorage, LocalStorage
from coursebook.errors import BackendUnavailableError


@pytest.fixture
def no_config(temp_dir, clean_env):
    """Path of a config file that does not exist, so no cwd config is picked up."""
    return os.path.join(temp_dir, "missing.yaml")


@pytest.fixture
def data_dir(temp_dir):
    path = os.path.join(temp_dir, "data")
    os.makedirs(path)
    return path


@pytest.fixture
def firebase_config(temp_dir, clean_env):
    """coursebook.yaml selecting the firebase backend, with cwd moved to temp_dir."""
    pytest.importorskip("yaml")
    clean_env.chdir(temp_dir)
    path = os.path.join(temp_dir, "coursebook.yaml")
    with open(path, "w", encoding="utf-8") as f:
        f.write("backend: firebase\n")
    return path


@pytest.fixture
def firebase_stores(temp_dir, monkeypatch):
    """Firestore pair replaced by SQLite stores in their own directory."""
    stores = LocalStorage(os.path.join(temp_dir, "remote")).build_stores()
    monkeypatch.setattr(FirebaseStorage, "build_stores", lambda self: stores)
    return stores


@pytest.fixture
def firebase_down(monkeypatch):
    def unavailable(self):
        raise BackendUnavailableError("Cannot open Firestore: no credentials")

    monkeypatch.setattr(FirebaseStorage, "build_stores", unavailable)