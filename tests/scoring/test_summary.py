"""
Tests for result totals.
"""

import pytest

from assess import (
    MultiChoiceAnswer,
    NumericalAnswer,
    ResultSummary,
    SingleChoiceAnswer,
    process_answers,
    summarize,
)


class TestSummarize:
    """Test summarize()."""

    def test_counts(self, mixed_test):
        """Test answered, correct, incorrect and unanswered counts."""
        answers = {
            0: SingleChoiceAnswer(option=1),
            1: MultiChoiceAnswer(options=[2]),
            2: NumericalAnswer(value="98"),
        }
        summary = summarize(mixed_test, process_answers(mixed_test, answers))
        assert summary.total_questions == 4
        assert summary.answered_questions == 3
        assert summary.correct_answers == 2
        assert summary.incorrect_answers == 1
        assert summary.not_answered == 1

    def test_counts_add_up(self, mixed_test):
        """Test that correct, incorrect and unanswered cover every question."""
        answers = {1: MultiChoiceAnswer(options=[0, 2]), 3: SingleChoiceAnswer(option=0)}
        summary = summarize(mixed_test, process_answers(mixed_test, answers))
        assert summary.correct_answers + summary.incorrect_answers + summary.not_answered == summary.total_questions

    def test_marks(self, mixed_test):
        """Test marks obtained and marks possible."""
        answers = {
            0: SingleChoiceAnswer(option=1),
            1: MultiChoiceAnswer(options=[2]),
            3: SingleChoiceAnswer(option=0),
        }
        summary = summarize(mixed_test, process_answers(mixed_test, answers))
        assert summary.total_marks_obtained == pytest.approx(4 - 1 - 0.5)
        assert summary.total_marks_possible == 4 + 4 + 4 + 2

    def test_percentage(self, mixed_test):
        """Test the percentage of marks possible."""
        answers = {0: SingleChoiceAnswer(option=1), 3: SingleChoiceAnswer(option=3)}
        summary = summarize(mixed_test, process_answers(mixed_test, answers))
        assert summary.percentage == pytest.approx(6 / 14 * 100)
        assert summary.model_dump()["percentage"] == pytest.approx(6 / 14 * 100)

    def test_percentage_can_be_negative(self, mixed_test):
        """Test that penalties can push the percentage below zero."""
        summary = summarize(mixed_test, process_answers(mixed_test, {0: SingleChoiceAnswer(option=0)}))
        assert summary.percentage < 0

    def test_empty_test(self):
        """Test that an empty test has zero totals and zero percentage."""
        summary = summarize([], [])
        assert summary == ResultSummary()
        assert summary.percentage == 0.0

    def test_length_mismatch(self, mixed_test):
        """Test that responses must match the questions one to one."""
        responses = process_answers(mixed_test, {})
        with pytest.raises(ValueError):
            summarize(mixed_test, responses[:-1])
