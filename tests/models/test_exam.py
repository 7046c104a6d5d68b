# tests/models/test_exam.py
"""Tests for the ExamSection model and grading."""

import pytest
from pydantic import ValidationError

from coursebook.models import ExamSection


def make_exam(**overrides):
    fields = {
        "title": "Quiz",
        "questions": ["2 + 2?", "Capital of France?"],
        "options": [["3", "4"], ["Paris", "Rome", "Oslo"]],
        "correct_answers": [1, 0],
    }
    fields.update(overrides)
    return ExamSection(**fields)


class TestExamSection:
    def test_defaults(self):
        exam = make_exam()
        assert exam.time_limit == 30
        assert exam.passing_score == 70

    def test_blank_questions_dropped_with_their_options(self):
        exam = make_exam(
            questions=["2 + 2?", "  ", "Capital of France?"],
            options=[["3", "4"], ["a", "b"], ["Paris", "Rome"]],
            correct_answers=[1, 0, 0],
        )
        assert exam.questions == ["2 + 2?", "Capital of France?"]
        assert exam.options == [["3", "4"], ["Paris", "Rome"]]
        assert exam.correct_answers == [1, 0]

    def test_all_blank_rejected(self):
        with pytest.raises(ValidationError, match="at least one question"):
            make_exam(questions=[" "], options=[["a"]], correct_answers=[0])

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ValidationError, match="same length"):
            make_exam(correct_answers=[1])

    def test_answer_must_be_an_option(self):
        with pytest.raises(ValidationError, match="Question 2"):
            make_exam(correct_answers=[1, 5])

    @pytest.mark.parametrize("score", [-1, 101])
    def test_passing_score_range(self, score):
        with pytest.raises(ValidationError):
            make_exam(passing_score=score)

    def test_time_limit_positive(self):
        with pytest.raises(ValidationError):
            make_exam(time_limit=0)


class TestGrade:
    def test_all_correct(self):
        result = make_exam().grade([1, 0])
        assert result.correct == 2
        assert result.score == 100.0
        assert result.passed is True
        assert result.per_question == [True, True]

    def test_half_correct_fails_default(self):
        result = make_exam().grade([1, 2])
        assert result.score == 50.0
        assert result.passed is False

    def test_pass_at_exact_score(self):
        result = make_exam(passing_score=50).grade([0, 0])
        assert result.passed is True

    def test_missing_responses_are_wrong(self):
        result = make_exam().grade([1])
        assert result.per_question == [True, False]

    def test_unanswered_none(self):
        result = make_exam().grade([None, 0])
        assert result.correct == 1

    def test_extra_responses_ignored(self):
        result = make_exam().grade([1, 0, 3, 3])
        assert result.total == 2
        assert result.correct == 2

    def test_result_carries_exam_id(self):
        exam = make_exam()
        assert exam.grade([]).exam_id == exam.id
