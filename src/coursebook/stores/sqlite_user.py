"""SQLite user store implementation."""

import sqlite3
from pathlib import Path

from coursebook.models import Role, UserRecord
from coursebook.stores.base import UserStore


class SQLiteUserStore(UserStore):
    """SQLite-backed user role store."""

    def __init__(self, db_path: str) -> None:
        """Initialize the store.

        Args:
            db_path: Path to SQLite database file
        """
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._db_path = db_path
        self._init_db()

    def _init_db(self) -> None:
        """Initialize the database schema."""
        with sqlite3.connect(self._db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS users (
                    uid TEXT PRIMARY KEY,
                    role TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    document TEXT NOT NULL
                )
            """)

    def put(self, user: UserRecord) -> None:
        """Store a user, overwriting if exists."""
        with sqlite3.connect(self._db_path) as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO users (uid, role, created_at, document)
                VALUES (?, ?, ?, ?)
                """,
                (user.uid, user.role.value, user.created_at.isoformat(), user.model_dump_json()),
            )

    def get(self, uid: str) -> UserRecord | None:
        """Retrieve a user by uid."""
        with sqlite3.connect(self._db_path) as conn:
            cursor = conn.execute("SELECT document FROM users WHERE uid = ?", (uid,))
            row = cursor.fetchone()
            return UserRecord.model_validate_json(row[0]) if row else None

    def delete(self, uid: str) -> None:
        """Delete a user by uid."""
        with sqlite3.connect(self._db_path) as conn:
            conn.execute("DELETE FROM users WHERE uid = ?", (uid,))

    def list_users(self) -> list[UserRecord]:
        """List all users, oldest first."""
        with sqlite3.connect(self._db_path) as conn:
            cursor = conn.execute("SELECT document FROM users ORDER BY created_at, uid")
            return [UserRecord.model_validate_json(row[0]) for row in cursor.fetchall()]

    def count_users(self) -> int:
        """Count the total number of users."""
        with sqlite3.connect(self._db_path) as conn:
            cursor = conn.execute("SELECT COUNT(uid) FROM users")
            return cursor.fetchone()[0]

    def count_admins(self) -> int:
        """Count users holding the admin role."""
        with sqlite3.connect(self._db_path) as conn:
            cursor = conn.execute(
                "SELECT COUNT(uid) FROM users WHERE role = ?", (Role.ADMIN.value,)
            )
            return cursor.fetchone()[0]
