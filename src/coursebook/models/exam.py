"""Exam section data models."""

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Self
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator


class ExamResult(BaseModel):
    """Outcome of grading one attempt at an exam."""

    exam_id: str
    total: int
    correct: int
    score: float  # percent, 0-100
    passed: bool
    per_question: list[bool] = Field(default_factory=list)


class ExamSection(BaseModel):
    """A timed multiple-choice quiz.

    ``options[i]`` holds the choices for ``questions[i]`` and
    ``correct_answers[i]`` is the index of the right choice. Blank questions
    are dropped together with their options and answer.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str
    description: str = ""
    questions: list[str]
    options: list[list[str]]
    correct_answers: list[int]
    time_limit: int = Field(default=30, gt=0)  # minutes
    passing_score: int = Field(default=70, ge=0, le=100)  # percent
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def _check_questions(self) -> Self:
        if not (len(self.questions) == len(self.options) == len(self.correct_answers)):
            raise ValueError("questions, options and correct_answers must have the same length")

        keep = [i for i, question in enumerate(self.questions) if question.strip()]
        self.questions = [self.questions[i].strip() for i in keep]
        self.options = [self.options[i] for i in keep]
        self.correct_answers = [self.correct_answers[i] for i in keep]

        if not self.questions:
            raise ValueError("An exam needs at least one question")

        for number, (choices, answer) in enumerate(
            zip(self.options, self.correct_answers, strict=True), 1
        ):
            if not 0 <= answer < len(choices):
                raise ValueError(f"Question {number}: correct answer {answer} is not an option")
        return self

    def grade(self, responses: Sequence[int | None]) -> ExamResult:
        """Grade selected option indices against the answer key.

        Missing trailing responses count as unanswered; extra ones are ignored.
        """
        per_question = [
            i < len(responses) and responses[i] == answer
            for i, answer in enumerate(self.correct_answers)
        ]
        total = len(per_question)
        correct = sum(per_question)
        score = 100.0 * correct / total
        return ExamResult(
            exam_id=self.id,
            total=total,
            correct=correct,
            score=score,
            passed=score >= self.passing_score,
            per_question=per_question,
        )
