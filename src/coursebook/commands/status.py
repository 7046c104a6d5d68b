# src/coursebook/commands/status.py
"""Status command - show content and user counts."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from coursebook.commands.base import StatusResult
from coursebook.config import get_stores, load_config, local_data_missing
from coursebook.errors import CoursebookError


def status(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> StatusResult:
    """Count chapters, their content, users and admins.

    Args:
        data_dir: Override data directory
        config_path: Override config file path
    """
    config = load_config(config_path)
    if local_data_missing(data_dir, config):
        return StatusResult(success=True)

    try:
        stores = get_stores(data_dir, config)
        chapters = stores["chapter_store"].list_chapters()
        user_store = stores["user_store"]
        total_users = user_store.count_users()
        total_admins = user_store.count_admins()
    except (sqlite3.Error, OSError, CoursebookError) as e:
        return StatusResult(success=False, error=f"Failed to access database: {e}")

    return StatusResult(
        success=True,
        total_chapters=len(chapters),
        total_tutorials=sum(len(c.tutorials) for c in chapters),
        total_practice_sections=sum(len(c.practice_sections) for c in chapters),
        total_exam_sections=sum(len(c.exam_sections) for c in chapters),
        total_users=total_users,
        total_admins=total_admins,
    )
