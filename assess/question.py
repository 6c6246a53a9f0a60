"""
Question models.

A Question carries the authoritative answer specification for one item in
the question bank. A TestQuestion places a Question inside a specific test,
with the marks weighting and section placement that test gives it.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QuestionKind(str, Enum):
    """Declared answer kind of a question."""

    SINGLE_CHOICE = "mcq_single"
    MULTI_CHOICE = "mcq_multiple"
    NUMERICAL = "numerical"


class Question(BaseModel):
    """
    Answer specification for a single question.

    Attributes:
        id: Question bank identifier
        kind: Declared answer kind
        correct_options: Zero-based indices of the correct options. Treated as
            a set for multi-choice questions; only the first element is
            consulted for single-choice questions. ``None`` and ``[]`` both
            mean "no option is correct".
        correct_answer: Expected answer string for numerical questions
        marks: Base marks awarded for a correct answer
        penalty: Base marks subtracted for an attempted but incorrect answer
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    kind: QuestionKind
    correct_options: list[int] | None = None
    correct_answer: str | None = None
    marks: float = Field(default=1.0, gt=0, description="Marks for a correct answer")
    penalty: float = Field(
        default=0.0,
        ge=0,
        alias="negative_marks",
        description="Marks subtracted for an incorrect answer",
    )

    def display_answer(self) -> list[int] | str | None:
        """Canonical correct value shown next to a student's response."""
        if self.kind == QuestionKind.NUMERICAL:
            return self.correct_answer
        if self.correct_options is None:
            return None
        return list(self.correct_options)


class TestQuestion(BaseModel):
    """
    A question instance inside a specific test.

    The same bank question can carry different weights in different tests,
    so ``marks`` and ``negative_marks`` override the question's base values.
    When an override is omitted the base value applies.
    """

    # Not a pytest test class despite the name.
    __test__ = False

    model_config = ConfigDict(frozen=True)

    question: Question
    marks: float | None = Field(default=None, gt=0)
    negative_marks: float | None = Field(default=None, ge=0)
    section_id: str = ""
    subsection_id: str = ""
    order: int = 0

    @property
    def effective_marks(self) -> float:
        return self.question.marks if self.marks is None else self.marks

    @property
    def effective_negative_marks(self) -> float:
        if self.negative_marks is None:
            return self.question.penalty
        return self.negative_marks
