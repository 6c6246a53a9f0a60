"""
Student answer variants.

A submitted answer is one of a closed set of tagged variants, discriminated
by ``kind``. The three answer-bearing variants mirror the question kinds;
``Unanswered`` marks an explicit absence and ``UnrecognizedAnswer`` holds a
submission that has none of the known shapes.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _AnswerBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def is_answered(self) -> bool:
        return True


class SingleChoiceAnswer(_AnswerBase):
    """One selected option index."""

    kind: Literal["mcq_single"] = "mcq_single"
    option: int


class MultiChoiceAnswer(_AnswerBase):
    """Selected option indices. Duplicates are kept as submitted."""

    kind: Literal["mcq_multiple"] = "mcq_multiple"
    options: list[int] = Field(default_factory=list)


class NumericalAnswer(_AnswerBase):
    """Free-form numeric answer, kept as the raw submitted string."""

    kind: Literal["numerical"] = "numerical"
    value: str


class UnrecognizedAnswer(_AnswerBase):
    """A submitted value with no known answer shape. Never correct."""

    kind: Literal["unrecognized"] = "unrecognized"
    raw: Any = None


class Unanswered(_AnswerBase):
    """Explicit absence of an answer."""

    kind: Literal["unanswered"] = "unanswered"

    @property
    def is_answered(self) -> bool:
        return False


StudentAnswer = Annotated[
    Union[
        SingleChoiceAnswer,
        MultiChoiceAnswer,
        NumericalAnswer,
        UnrecognizedAnswer,
        Unanswered,
    ],
    Field(discriminator="kind"),
]

ANSWER_TYPES = (
    SingleChoiceAnswer,
    MultiChoiceAnswer,
    NumericalAnswer,
    UnrecognizedAnswer,
    Unanswered,
)

UNANSWERED = Unanswered()


def _is_index(value: Any) -> bool:
    # bool is an int subclass but never a valid option index
    return isinstance(value, int) and not isinstance(value, bool)


def coerce_answer(raw: Any) -> StudentAnswer:
    """
    Convert a raw submitted value into a StudentAnswer variant.

    Args:
        raw: Value as collected by the client (None, int, list of ints, str)
             or an already-typed answer

    Returns:
        Matching variant; ``UNANSWERED`` for None and ``UnrecognizedAnswer``
        for anything without a known shape

    Examples:
        >>> coerce_answer(2)
        SingleChoiceAnswer(kind='mcq_single', option=2)
        >>> coerce_answer([0, 2]).options
        [0, 2]
        >>> coerce_answer(None) is UNANSWERED
        True
    """
    if raw is None:
        return UNANSWERED
    if isinstance(raw, ANSWER_TYPES):
        return raw
    if _is_index(raw):
        return SingleChoiceAnswer(option=raw)
    if isinstance(raw, float) and math.isfinite(raw) and raw.is_integer():
        return SingleChoiceAnswer(option=int(raw))
    if isinstance(raw, str):
        return NumericalAnswer(value=raw)
    if isinstance(raw, (list, tuple)) and all(_is_index(item) for item in raw):
        return MultiChoiceAnswer(options=list(raw))
    return UnrecognizedAnswer(raw=raw)
