"""
Answer checker convenience functions.

Build a configured evaluator straight from a correct answer, without first
constructing a Question.

Examples:
    >>> from assess.answers import MultiChoiceAnswer, NumericalAnswer
    >>> num_cmp("9.81", tolerance=0.01).evaluate(NumericalAnswer(value="9.8"))
    True
    >>> checkbox_cmp([0, 2]).evaluate(MultiChoiceAnswer(options=[2, 0]))
    True
"""

from __future__ import annotations

from collections.abc import Sequence

from .evaluator import DEFAULT_TOLERANCE
from .evaluators import MultiChoiceEvaluator, NumericEvaluator, SingleChoiceEvaluator


def num_cmp(correct_answer: str | int | float, tolerance: float = DEFAULT_TOLERANCE) -> NumericEvaluator:
    """
    Create numerical answer checker.

    Args:
        correct_answer: Correct value; numbers are converted to their string form
        tolerance: Absolute tolerance (default 1e-4, inclusive)

    Returns:
        NumericEvaluator for the value
    """
    return NumericEvaluator(correct_answer=str(correct_answer), tolerance=tolerance)


def radio_cmp(correct_option: int) -> SingleChoiceEvaluator:
    """Create single-choice answer checker for one zero-based option index."""
    return SingleChoiceEvaluator(correct_answer=[correct_option])


def checkbox_cmp(correct_options: Sequence[int]) -> MultiChoiceEvaluator:
    """
    Create multi-choice answer checker.

    Args:
        correct_options: Zero-based indices of every correct option; order
            does not matter and an empty sequence means none is correct

    Returns:
        MultiChoiceEvaluator for the option set
    """
    return MultiChoiceEvaluator(correct_answer=list(correct_options))
