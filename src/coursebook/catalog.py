# src/coursebook/catalog.py
"""Chapter catalog: CRUD over chapters and the content embedded in them."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from coursebook.errors import (
    ChapterNotFoundError,
    DuplicateChapterError,
    ExamNotFoundError,
    PracticeNotFoundError,
    TutorialNotFoundError,
)
from coursebook.logging import get_logger
from coursebook.models import Chapter, ExamResult, ExamSection, PracticeSection, Tutorial
from coursebook.stores import ChapterStore

logger = get_logger(__name__)

DEFAULT_CHAPTERS: list[tuple[str, str]] = [
    ("Chapter 1", "Introduction to ICT fundamentals and basic concepts"),
    ("Chapter 2", "Computer hardware and system components"),
    ("Chapter 3", "Software applications and operating systems"),
    ("Chapter 4", "Networking and internet technologies"),
    ("Chapter 5", "Database management and data handling"),
    ("Chapter 6", "Cybersecurity and digital safety practices"),
]

# Fields a chapter update may touch; nested content has its own methods
_CHAPTER_FIELDS = {"title", "description", "order"}


class ChapterCatalog:
    """Reads and writes chapters through a ``ChapterStore``.

    Tutorials, practice sections and exams live inside their chapter
    document, so every nested operation is a read-modify-write of one
    chapter. Nested records keep their id and ``created_at`` across updates.
    """

    def __init__(
        self,
        store: ChapterStore,
        default_time_limit: int = 30,
        default_passing_score: int = 70,
    ) -> None:
        self.store = store
        self.default_time_limit = default_time_limit
        self.default_passing_score = default_passing_score

    # Chapters

    def create_chapter(self, title: str, description: str = "", order: int = 0) -> Chapter:
        """Create an empty chapter.

        Raises:
            DuplicateChapterError: If a chapter with this title exists.
        """
        if self.store.find_by_title(title):
            logger.error("Chapter %r already exists", title)
            raise DuplicateChapterError(title)

        chapter = Chapter(title=title, description=description, order=order)
        self.store.put(chapter)
        logger.info("Created chapter %r (%s)", title, chapter.id)
        return chapter

    def list_chapters(self) -> list[Chapter]:
        return self.store.list_chapters()

    def get_chapter(self, chapter_id: str) -> Chapter:
        """Get a chapter with all its content.

        Raises:
            ChapterNotFoundError: If there is no such chapter.
        """
        chapter = self.store.get(chapter_id)
        if chapter is None:
            logger.error("Chapter not found: %s", chapter_id)
            raise ChapterNotFoundError(chapter_id)
        return chapter

    def update_chapter(self, chapter_id: str, **fields: Any) -> Chapter:
        """Update title, description and/or order."""
        unknown = set(fields) - _CHAPTER_FIELDS
        if unknown:
            raise ValueError(f"Cannot update chapter fields: {', '.join(sorted(unknown))}")

        chapter = self.get_chapter(chapter_id)
        updated = Chapter.model_validate({**chapter.model_dump(), **fields})
        updated.touch()
        self.store.put(updated)
        return updated

    def delete_chapter(self, chapter_id: str) -> None:
        self.get_chapter(chapter_id)
        self.store.delete(chapter_id)
        logger.info("Deleted chapter %s", chapter_id)

    def delete_all_chapters(self) -> int:
        deleted = self.store.delete_all()
        logger.info("Deleted all %d chapters", deleted)
        return deleted

    def create_default_chapters(self) -> list[Chapter]:
        """Seed the six default chapters, skipping titles that already exist."""
        created = []
        for order, (title, description) in enumerate(DEFAULT_CHAPTERS, 1):
            if self.store.find_by_title(title):
                continue
            chapter = Chapter(title=title, description=description, order=order)
            self.store.put(chapter)
            created.append(chapter)
        logger.info("Seeded %d default chapters", len(created))
        return created

    def cleanup_duplicate_chapters(self) -> int:
        """Keep the first chapter of each title and delete the rest.

        "First" means lowest order, then earliest created.

        Returns:
            Number of chapters deleted.
        """
        by_title: dict[str, list[Chapter]] = {}
        for chapter in self.store.list_chapters():
            by_title.setdefault(chapter.title, []).append(chapter)

        deleted = 0
        for title, chapters in by_title.items():
            if len(chapters) < 2:
                continue
            chapters.sort(key=lambda c: (c.order, c.created_at))
            logger.info("Found %d duplicates for %r, keeping %s", len(chapters), title, chapters[0].id)
            for duplicate in chapters[1:]:
                self.store.delete(duplicate.id)
                deleted += 1
        return deleted

    # Tutorials

    def add_tutorial(
        self, chapter_id: str, title: str, description: str = "", links: Sequence[str] = ()
    ) -> Tutorial:
        chapter = self.get_chapter(chapter_id)
        tutorial = Tutorial(title=title, description=description, links=list(links))
        chapter.tutorials.append(tutorial)
        self._save(chapter)
        return tutorial

    def update_tutorial(self, chapter_id: str, tutorial_id: str, **fields: Any) -> Tutorial:
        chapter = self.get_chapter(chapter_id)
        index = _index_of(chapter.tutorials, tutorial_id)
        if index is None:
            logger.error("Tutorial %s not found in chapter %s", tutorial_id, chapter_id)
            raise TutorialNotFoundError(tutorial_id)

        current = chapter.tutorials[index]
        tutorial = Tutorial.model_validate(_preserving(current, fields))
        chapter.tutorials[index] = tutorial
        self._save(chapter)
        return tutorial

    def delete_tutorial(self, chapter_id: str, tutorial_id: str) -> None:
        chapter = self.get_chapter(chapter_id)
        chapter.tutorials = [t for t in chapter.tutorials if t.id != tutorial_id]
        self._save(chapter)

    # Practice sections

    def add_practice(self, chapter_id: str, **fields: Any) -> PracticeSection:
        """Add a practice section built from ``fields`` (validated)."""
        chapter = self.get_chapter(chapter_id)
        practice = PracticeSection.model_validate(fields)
        chapter.practice_sections.append(practice)
        self._save(chapter)
        return practice

    def update_practice(self, chapter_id: str, practice_id: str, **fields: Any) -> PracticeSection:
        """Replace a practice section, keeping its id and creation time.

        Fields not given are cleared, as the authoring form always submits
        the whole section.
        """
        chapter = self.get_chapter(chapter_id)
        index = _index_of(chapter.practice_sections, practice_id)
        if index is None:
            logger.error("Practice section %s not found in chapter %s", practice_id, chapter_id)
            raise PracticeNotFoundError(practice_id)

        current = chapter.practice_sections[index]
        practice = PracticeSection.model_validate(
            {**fields, "id": current.id, "created_at": current.created_at}
        )
        chapter.practice_sections[index] = practice
        self._save(chapter)
        return practice

    def delete_practice(self, chapter_id: str, practice_id: str) -> None:
        chapter = self.get_chapter(chapter_id)
        chapter.practice_sections = [p for p in chapter.practice_sections if p.id != practice_id]
        self._save(chapter)

    # Exams

    def add_exam(self, chapter_id: str, **fields: Any) -> ExamSection:
        """Add an exam; time limit and passing score fall back to the catalog defaults."""
        chapter = self.get_chapter(chapter_id)
        exam = ExamSection.model_validate(
            {
                "time_limit": self.default_time_limit,
                "passing_score": self.default_passing_score,
                **fields,
            }
        )
        chapter.exam_sections.append(exam)
        self._save(chapter)
        return exam

    def update_exam(self, chapter_id: str, exam_id: str, **fields: Any) -> ExamSection:
        """Merge ``fields`` over the stored exam and re-validate."""
        chapter = self.get_chapter(chapter_id)
        index = _index_of(chapter.exam_sections, exam_id)
        if index is None:
            logger.error("Exam section %s not found in chapter %s", exam_id, chapter_id)
            raise ExamNotFoundError(exam_id)

        current = chapter.exam_sections[index]
        exam = ExamSection.model_validate(_preserving(current, fields))
        chapter.exam_sections[index] = exam
        self._save(chapter)
        return exam

    def delete_exam(self, chapter_id: str, exam_id: str) -> None:
        chapter = self.get_chapter(chapter_id)
        chapter.exam_sections = [e for e in chapter.exam_sections if e.id != exam_id]
        self._save(chapter)

    def get_exam(self, chapter_id: str, exam_id: str) -> ExamSection:
        chapter = self.get_chapter(chapter_id)
        index = _index_of(chapter.exam_sections, exam_id)
        if index is None:
            raise ExamNotFoundError(exam_id)
        return chapter.exam_sections[index]

    def grade_exam(
        self, chapter_id: str, exam_id: str, responses: Sequence[int | None]
    ) -> ExamResult:
        return self.get_exam(chapter_id, exam_id).grade(responses)

    def _save(self, chapter: Chapter) -> None:
        chapter.touch()
        self.store.put(chapter)


def _index_of(items: Sequence[Tutorial | PracticeSection | ExamSection], item_id: str) -> int | None:
    for i, item in enumerate(items):
        if item.id == item_id:
            return i
    return None


def _preserving(current: Tutorial | ExamSection, fields: dict[str, Any]) -> dict[str, Any]:
    """``current`` with ``fields`` applied; id and created_at cannot change."""
    return {**current.model_dump(), **fields, "id": current.id, "created_at": current.created_at}
