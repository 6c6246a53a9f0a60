"""
Result totals for a scored submission.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, computed_field

from assess.question import TestQuestion

from .response import Response


class ResultSummary(BaseModel):
    """
    Totals for a scored submission.

    ``incorrect_answers`` counts only attempted questions, so
    ``correct_answers + incorrect_answers + not_answered == total_questions``.
    """

    model_config = ConfigDict(frozen=True)

    total_questions: int = Field(default=0, ge=0)
    answered_questions: int = Field(default=0, ge=0)
    correct_answers: int = Field(default=0, ge=0)
    incorrect_answers: int = Field(default=0, ge=0)
    not_answered: int = Field(default=0, ge=0)
    total_marks_obtained: float = 0.0
    total_marks_possible: float = 0.0

    @computed_field
    @property
    def percentage(self) -> float:
        """Marks obtained as a percentage of marks possible, 0.0 if none possible."""
        if self.total_marks_possible <= 0:
            return 0.0
        return self.total_marks_obtained / self.total_marks_possible * 100


def summarize(questions: Sequence[TestQuestion], responses: Sequence[Response]) -> ResultSummary:
    """
    Compute the totals of a submission.

    Args:
        questions: Questions in test order
        responses: Responses produced for those questions

    Returns:
        ResultSummary

    Raises:
        ValueError: If there is not exactly one response per question
    """
    if len(questions) != len(responses):
        raise ValueError(
            f"Number of responses ({len(responses)}) must match "
            f"number of questions ({len(questions)})"
        )

    answered = sum(1 for r in responses if r.is_answered)
    correct = sum(1 for r in responses if r.is_correct)

    return ResultSummary(
        total_questions=len(questions),
        answered_questions=answered,
        correct_answers=correct,
        incorrect_answers=sum(1 for r in responses if r.is_answered and not r.is_correct),
        not_answered=len(questions) - answered,
        total_marks_obtained=sum(r.marks_obtained for r in responses),
        total_marks_possible=sum(q.effective_marks for q in questions),
    )
