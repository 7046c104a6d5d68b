# tests/models/test_practice.py
"""Tests for the PracticeSection model."""

import pytest
from pydantic import ValidationError

from coursebook.models import AnswerKind, PracticeSection


class TestPracticeSection:
    def test_create_text_practice(self):
        practice = PracticeSection(title="Capitals", answers=["Paris"])
        assert practice.answer_kind == AnswerKind.TEXT
        assert practice.primary_answer == "Paris"
        assert practice.id is not None

    def test_unique_ids(self):
        a = PracticeSection(title="A", answers=["x"])
        b = PracticeSection(title="B", answers=["y"])
        assert a.id != b.id

    def test_needs_a_prompt(self):
        with pytest.raises(ValidationError, match="at least one of"):
            PracticeSection(answers=["x"])

    def test_image_alone_is_a_prompt(self):
        practice = PracticeSection(image_url="https://img/q.png", answers=["x"])
        assert practice.title is None

    def test_blank_strings_become_none(self):
        practice = PracticeSection(title="  Loops ", description="   ", answers=["x"])
        assert practice.title == "Loops"
        assert practice.description is None

    def test_blank_title_is_not_a_prompt(self):
        with pytest.raises(ValidationError):
            PracticeSection(title="   ", answers=["x"])

    @pytest.mark.parametrize("kind", [AnswerKind.TEXT, AnswerKind.CODE])
    def test_text_and_code_need_answer(self, kind):
        with pytest.raises(ValidationError, match="answer is required"):
            PracticeSection(title="Q", answers=["  "], answer_kind=kind)

    def test_image_needs_answer_image(self):
        with pytest.raises(ValidationError, match="answer image"):
            PracticeSection(title="Q", answer_kind=AnswerKind.IMAGE)

    def test_image_practice(self):
        practice = PracticeSection(
            title="Diagram",
            answer_kind=AnswerKind.IMAGE,
            answer_image_url="https://img/a.png",
        )
        assert practice.primary_answer == ""

    def test_mixed_accepts_either(self):
        PracticeSection(title="Q", answer_kind="mixed", answers=["text"])
        PracticeSection(title="Q", answer_kind="mixed", answer_image_url="https://img/a.png")
        with pytest.raises(ValidationError):
            PracticeSection(title="Q", answer_kind="mixed")

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            PracticeSection(title="Q", answers=["x"], answer_kind="video")

    def test_json_round_trip_keeps_kind(self):
        practice = PracticeSection(title="Q", answers=["x = 1"], answer_kind="code")
        restored = PracticeSection.model_validate_json(practice.model_dump_json())
        assert restored.answer_kind is AnswerKind.CODE
        assert restored.created_at == practice.created_at
