# tests/stores/test_sqlite_user.py
"""Tests for SQLite user store."""

from datetime import UTC, datetime, timedelta

from coursebook.models import Role, UserRecord
from coursebook.stores.base import UserStore


class TestSQLiteUserStore:
    def test_is_userstore(self, user_store):
        assert isinstance(user_store, UserStore)

    def test_put_and_get(self, user_store):
        user = UserRecord(uid="u1", email="a@example.com", display_name="Ann")
        user_store.put(user)

        retrieved = user_store.get("u1")
        assert retrieved is not None
        assert retrieved.email == "a@example.com"
        assert retrieved.display_name == "Ann"
        assert retrieved.role is Role.USER

    def test_get_nonexistent(self, user_store):
        assert user_store.get("missing") is None

    def test_counts(self, user_store):
        user_store.put(UserRecord(uid="a", email="a@x", role=Role.ADMIN))
        user_store.put(UserRecord(uid="b", email="b@x"))
        user_store.put(UserRecord(uid="c", email="c@x"))

        assert user_store.count_users() == 3
        assert user_store.count_admins() == 1

    def test_role_change_updates_admin_count(self, user_store):
        user = UserRecord(uid="a", email="a@x", role=Role.ADMIN)
        user_store.put(user)
        user.role = Role.USER
        user_store.put(user)
        assert user_store.count_admins() == 0

    def test_list_oldest_first(self, user_store):
        now = datetime.now(UTC)
        user_store.put(UserRecord(uid="new", email="n@x", created_at=now))
        user_store.put(UserRecord(uid="old", email="o@x", created_at=now - timedelta(days=1)))

        assert [u.uid for u in user_store.list_users()] == ["old", "new"]

    def test_delete(self, user_store):
        user_store.put(UserRecord(uid="a", email="a@x"))
        user_store.delete("a")
        assert user_store.get("a") is None
        assert user_store.count_users() == 0
