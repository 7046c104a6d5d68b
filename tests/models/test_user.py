# tests/models/test_user.py
"""Tests for the user and identity models."""

import pytest
from pydantic import ValidationError

from coursebook.models import Identity, Role, UserRecord


class TestUserRecord:
    def test_defaults(self):
        user = UserRecord(uid="u1", email="a@example.com")
        assert user.role is Role.USER
        assert user.is_admin is False
        assert user.last_login is None
        assert user.created_at.tzinfo is not None

    def test_role_from_string(self):
        user = UserRecord(uid="u1", email="a@example.com", role="admin")
        assert user.role is Role.ADMIN
        assert user.is_admin

    def test_unknown_role(self):
        with pytest.raises(ValidationError):
            UserRecord(uid="u1", email="a@example.com", role="owner")

    def test_json_round_trip_keeps_role(self):
        user = UserRecord(uid="u1", email="a@example.com", role=Role.ADMIN)
        restored = UserRecord.model_validate_json(user.model_dump_json())
        assert restored == user


class TestIdentity:
    def test_frozen(self):
        identity = Identity(uid="u1", email="a@example.com")
        with pytest.raises(ValidationError):
            identity.email = "b@example.com"
