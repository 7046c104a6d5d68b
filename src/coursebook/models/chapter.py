"""Chapter and tutorial data models."""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator

from coursebook.models.exam import ExamSection
from coursebook.models.practice import PracticeSection


def _now() -> datetime:
    return datetime.now(UTC)


class Tutorial(BaseModel):
    """A titled list of video links."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    description: str = ""
    links: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_now)

    @field_validator("links")
    @classmethod
    def _drop_blank_links(cls, links: list[str]) -> list[str]:
        return [link.strip() for link in links if link.strip()]


class Chapter(BaseModel):
    """An ordered grouping of tutorials, practice sections and exams."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    description: str = ""
    order: int = 0
    tutorials: list[Tutorial] = Field(default_factory=list)
    practice_sections: list[PracticeSection] = Field(default_factory=list)
    exam_sections: list[ExamSection] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

    @property
    def content_count(self) -> int:
        """Total number of tutorials, practice sections and exams."""
        return len(self.tutorials) + len(self.practice_sections) + len(self.exam_sections)

    def touch(self) -> None:
        """Bump ``updated_at`` to now."""
        self.updated_at = _now()
