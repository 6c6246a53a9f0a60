"""
Choice answer evaluators.

Single-choice answers match the first listed correct option. Multi-choice
answers match when the selected options and the correct options are the
same set.
"""

from __future__ import annotations

from collections.abc import Sequence

from assess.answers import MultiChoiceAnswer, SingleChoiceAnswer
from assess.question import Question, QuestionKind

from ..evaluator import DEFAULT_TOLERANCE, AnswerEvaluator


def check_single(student_index: int, correct_options: Sequence[int]) -> bool:
    """
    Check a single-choice selection.

    Only ``correct_options[0]`` is consulted; further elements are ignored.

    Args:
        student_index: Selected option index
        correct_options: Correct option indices

    Returns:
        True if there is a correct option and it equals the selection
    """
    if not correct_options:
        return False
    return correct_options[0] == student_index


def check_multiple(student_indices: Sequence[int], correct_options: Sequence[int]) -> bool:
    """
    Check a multi-choice selection as an unordered set.

    Args:
        student_indices: Selected option indices
        correct_options: Correct option indices

    Returns:
        True if both contain the same indices. An empty key is matched
        only by an empty selection.

    Examples:
        >>> check_multiple([2, 0], [0, 2])
        True
        >>> check_multiple([0, 1], [0])
        False
    """
    if not correct_options:
        return len(student_indices) == 0
    if len(student_indices) != len(correct_options):
        return False
    return sorted(student_indices) == sorted(correct_options)


class SingleChoiceEvaluator(AnswerEvaluator):
    """Evaluator for single-choice questions."""

    question_kind = QuestionKind.SINGLE_CHOICE
    answer_type = SingleChoiceAnswer

    correct_answer: list[int] | None = None

    @classmethod
    def for_question(cls, question: Question, tolerance: float = DEFAULT_TOLERANCE) -> SingleChoiceEvaluator:
        return cls(correct_answer=question.correct_options, tolerance=tolerance)

    def check(self, answer: SingleChoiceAnswer) -> bool:
        return check_single(answer.option, self.correct_answer or [])


class MultiChoiceEvaluator(AnswerEvaluator):
    """Evaluator for multi-choice questions."""

    question_kind = QuestionKind.MULTI_CHOICE
    answer_type = MultiChoiceAnswer

    correct_answer: list[int] | None = None

    @classmethod
    def for_question(cls, question: Question, tolerance: float = DEFAULT_TOLERANCE) -> MultiChoiceEvaluator:
        return cls(correct_answer=question.correct_options, tolerance=tolerance)

    def check(self, answer: MultiChoiceAnswer) -> bool:
        return check_multiple(answer.options, self.correct_answer or [])
