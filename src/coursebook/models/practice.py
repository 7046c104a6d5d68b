"""Practice section data model."""

from datetime import UTC, datetime
from enum import Enum
from typing import Self
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator, model_validator


class AnswerKind(str, Enum):
    """Author-declared hint for how an answer should be rendered."""

    TEXT = "text"
    CODE = "code"
    IMAGE = "image"
    MIXED = "mixed"


class PracticeSection(BaseModel):
    """A prompt (title, description and/or image) paired with a stored answer.

    The optional fields follow the rules of the authoring form:
    - at least one of title, description or image_url must be present
    - text and code answers need a non-blank answer
    - image answers need answer_image_url
    - mixed answers need either of the two
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    questions: list[str] = Field(default_factory=list)
    answers: list[str] = Field(default_factory=list)
    answer_kind: AnswerKind = AnswerKind.TEXT
    answer_image_url: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("title", "description", "image_url", "answer_image_url")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        return value or None

    @model_validator(mode="after")
    def _check_prompt_and_answer(self) -> Self:
        if not (self.title or self.description or self.image_url):
            raise ValueError("Provide at least one of: title, description, or image")

        has_answer = bool(self.primary_answer.strip())
        if self.answer_kind in (AnswerKind.TEXT, AnswerKind.CODE) and not has_answer:
            raise ValueError("An answer is required for text and code practice")
        if self.answer_kind is AnswerKind.IMAGE and not self.answer_image_url:
            raise ValueError("An answer image is required for image practice")
        if self.answer_kind is AnswerKind.MIXED and not (has_answer or self.answer_image_url):
            raise ValueError("Mixed practice needs a text/code answer or an answer image")
        return self

    @property
    def primary_answer(self) -> str:
        """The answer that gets rendered, or an empty string."""
        return self.answers[0] if self.answers else ""
