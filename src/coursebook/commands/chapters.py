# src/coursebook/commands/chapters.py
"""Chapter commands - list, add, delete, seed and clean up chapters.

Destructive commands take an optional confirm callback so each UI can ask
in its own way.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any

from coursebook.catalog import DEFAULT_CHAPTERS, ChapterCatalog
from coursebook.commands.base import (
    ChapterInfo,
    ChapterListResult,
    ChapterResult,
    CleanupResult,
    ConfirmCallback,
    ConfirmRequest,
    SeedResult,
)
from coursebook.config import get_stores, load_config, local_data_missing
from coursebook.errors import CoursebookError
from coursebook.models import Chapter

_ACCESS_ERRORS = (sqlite3.Error, OSError, CoursebookError)


def _info(chapter: Chapter) -> ChapterInfo:
    return ChapterInfo(
        id=chapter.id,
        title=chapter.title,
        order=chapter.order,
        description=chapter.description,
        tutorials=len(chapter.tutorials),
        practice_sections=len(chapter.practice_sections),
        exam_sections=len(chapter.exam_sections),
    )


def _catalog(data_dir: str | None, config: dict[str, Any]) -> ChapterCatalog:
    return ChapterCatalog(get_stores(data_dir, config)["chapter_store"])


def list_chapters(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ChapterListResult:
    """List chapters in display order."""
    config = load_config(config_path)
    if local_data_missing(data_dir, config):
        return ChapterListResult(success=True)

    try:
        catalog = _catalog(data_dir, config)
    except _ACCESS_ERRORS as e:
        return ChapterListResult(success=False, error=f"Failed to access database: {e}")

    return ChapterListResult(
        success=True,
        chapters=[_info(chapter) for chapter in catalog.list_chapters()],
    )


def add_chapter(
    title: str,
    description: str = "",
    order: int = 0,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> ChapterResult:
    """Create a chapter; fails if the title is taken."""
    if not title.strip():
        return ChapterResult(success=False, error="Title is required")

    try:
        catalog = _catalog(data_dir, load_config(config_path))
        chapter = catalog.create_chapter(title.strip(), description=description, order=order)
    except _ACCESS_ERRORS as e:
        return ChapterResult(success=False, error=str(e))

    return ChapterResult(success=True, chapter=_info(chapter))


def delete_chapter(
    chapter_id: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    on_confirm: ConfirmCallback | None = None,
) -> ChapterResult:
    """Delete a chapter and everything in it.

    Args:
        chapter_id: Chapter to delete
        data_dir: Override data directory
        config_path: Override config file path
        on_confirm: Called with the details of the deletion. Return False to
            cancel. If None, deletion proceeds without confirmation.
    """
    try:
        catalog = _catalog(data_dir, load_config(config_path))
        chapter = catalog.get_chapter(chapter_id)
    except _ACCESS_ERRORS as e:
        return ChapterResult(success=False, error=str(e))

    if on_confirm is not None:
        request = ConfirmRequest(
            message=f"Delete {chapter.title}?",
            details=f"This will remove {chapter.content_count} content items with the chapter.",
        )
        if not on_confirm(request):
            return ChapterResult(success=False, error="Cancelled.")

    catalog.delete_chapter(chapter_id)
    return ChapterResult(success=True, chapter=_info(chapter))


def seed_chapters(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> SeedResult:
    """Create the default chapters that do not exist yet."""
    try:
        catalog = _catalog(data_dir, load_config(config_path))
        created = catalog.create_default_chapters()
    except _ACCESS_ERRORS as e:
        return SeedResult(success=False, error=str(e))

    return SeedResult(
        success=True,
        created=[chapter.title for chapter in created],
        skipped=len(DEFAULT_CHAPTERS) - len(created),
    )


def cleanup_chapters(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> CleanupResult:
    """Remove chapters whose title duplicates an earlier chapter."""
    try:
        catalog = _catalog(data_dir, load_config(config_path))
        deleted = catalog.cleanup_duplicate_chapters()
    except _ACCESS_ERRORS as e:
        return CleanupResult(success=False, error=str(e))

    return CleanupResult(success=True, deleted=deleted)
