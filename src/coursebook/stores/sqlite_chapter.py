"""SQLite chapter store implementation."""

import sqlite3
from pathlib import Path

from coursebook.models import Chapter
from coursebook.stores.base import ChapterStore


class SQLiteChapterStore(ChapterStore):
    """SQLite-based chapter store.

    The full chapter document is kept as JSON; title and order are copied
    into columns for lookups and sorting.
    """

    def __init__(self, db_path: str) -> None:
        """Initialize the SQLite store."""
        self.db_path = db_path
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS chapters (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    sort_order INTEGER NOT NULL,
                    document TEXT NOT NULL
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_title ON chapters(title)")
            conn.commit()

    def put(self, chapter: Chapter) -> None:
        """Store a chapter, overwriting if exists."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO chapters (id, title, sort_order, document)
                VALUES (?, ?, ?, ?)
                """,
                (chapter.id, chapter.title, chapter.order, chapter.model_dump_json()),
            )
            conn.commit()

    def get(self, chapter_id: str) -> Chapter | None:
        """Retrieve a chapter by ID."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("SELECT document FROM chapters WHERE id = ?", (chapter_id,))
            row = cursor.fetchone()
            if row is None:
                return None
            return Chapter.model_validate_json(row[0])

    def delete(self, chapter_id: str) -> None:
        """Delete a chapter by ID."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM chapters WHERE id = ?", (chapter_id,))
            conn.commit()

    def list_chapters(self) -> list[Chapter]:
        """List all chapters in display order."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("SELECT document FROM chapters ORDER BY sort_order, title")
            return [Chapter.model_validate_json(row[0]) for row in cursor.fetchall()]

    def find_by_title(self, title: str) -> list[Chapter]:
        """Get all chapters with exactly this title."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute(
                "SELECT document FROM chapters WHERE title = ? ORDER BY sort_order",
                (title,),
            )
            return [Chapter.model_validate_json(row[0]) for row in cursor.fetchall()]

    def delete_all(self) -> int:
        """Delete every chapter."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("DELETE FROM chapters")
            conn.commit()
            return cursor.rowcount

    def count_chapters(self) -> int:
        """Count the total number of chapters in the store."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("SELECT COUNT(id) FROM chapters")
            count = cursor.fetchone()
            return count[0] if count else 0
