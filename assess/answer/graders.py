"""
Marks calculation.

Converts a correctness decision into awarded marks under negative marking.
"""

from __future__ import annotations


def calculate_marks(is_correct: bool, marks: float, negative_marks: float) -> float:
    """
    Marks awarded for an attempted answer.

    Only call this for answered questions: an unanswered question scores 0
    and must never incur the penalty.

    Args:
        is_correct: Whether the answer was judged correct
        marks: Marks for a correct answer
        negative_marks: Penalty for an incorrect answer (non-negative)

    Returns:
        ``marks`` when correct, ``-negative_marks`` otherwise
    """
    if is_correct:
        return marks
    return -negative_marks
