"""
Base answer evaluator framework.

Provides the abstract base class for answer evaluators, a registry that maps
each question kind to its evaluator, and the ``evaluate`` dispatcher used by
the scoring pipeline.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from assess.answers import StudentAnswer, Unanswered, UnrecognizedAnswer
from assess.question import Question, QuestionKind

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-4


class AnswerEvaluator(BaseModel, ABC):
    """
    Abstract base class for answer evaluators.

    Each evaluator checks answers for one question kind against a correct
    answer specification. Evaluators never raise on a malformed or
    mistyped answer: it simply evaluates to ``False``.

    Subclasses must implement:
    - check(): comparison for an answer of the expected variant
    - question_kind / answer_type: what the evaluator handles
    """

    model_config = ConfigDict(frozen=True)

    question_kind: ClassVar[QuestionKind]
    answer_type: ClassVar[type[BaseModel]]

    correct_answer: Any = Field(default=None, description="The correct answer to compare against")
    tolerance: float = Field(default=DEFAULT_TOLERANCE, ge=0, description="Absolute tolerance for numeric comparison")

    @classmethod
    @abstractmethod
    def for_question(cls, question: Question, tolerance: float = DEFAULT_TOLERANCE) -> AnswerEvaluator:
        """Build an evaluator from a question's answer specification."""

    @abstractmethod
    def check(self, answer: Any) -> bool:
        """
        Compare an answer of ``answer_type`` with the correct answer.

        Args:
            answer: Student answer, already known to be of ``answer_type``

        Returns:
            True if the answer is correct
        """

    def evaluate(self, answer: StudentAnswer | None) -> bool:
        """
        Evaluate a student answer of any variant.

        Args:
            answer: Student answer, or None when absent

        Returns:
            True only for an answer of the expected variant that matches
        """
        if answer is None or isinstance(answer, Unanswered):
            return False

        if not isinstance(answer, self.answer_type):
            if isinstance(answer, UnrecognizedAnswer):
                logger.debug("Unrecognized answer shape for %s: %r", self.question_kind.value, answer.raw)
            else:
                logger.debug(
                    "Answer kind %s does not match question kind %s",
                    answer.kind,
                    self.question_kind.value,
                )
            return False

        return self.check(answer)


class EvaluatorRegistry:
    """
    Registry of answer evaluators keyed by question kind.

    Provides kind-based dispatch to the appropriate evaluator.
    """

    def __init__(self) -> None:
        self._evaluators: dict[QuestionKind, type[AnswerEvaluator]] = {}

    def register(self, evaluator_class: type[AnswerEvaluator]) -> None:
        """
        Register an evaluator for the question kind it declares.

        Raises:
            TypeError: If evaluator_class is not an AnswerEvaluator subclass
        """
        if not (isinstance(evaluator_class, type) and issubclass(evaluator_class, AnswerEvaluator)):
            raise TypeError(f"evaluator_class must be a subclass of AnswerEvaluator, got {evaluator_class}")
        self._evaluators[evaluator_class.question_kind] = evaluator_class

    def get_evaluator(self, kind: QuestionKind) -> type[AnswerEvaluator] | None:
        return self._evaluators.get(kind)

    def create_evaluator(self, question: Question, tolerance: float = DEFAULT_TOLERANCE) -> AnswerEvaluator:
        """
        Create the evaluator for a question.

        Raises:
            ValueError: If no evaluator is registered for the question's kind
        """
        evaluator_class = self.get_evaluator(question.kind)
        if evaluator_class is None:
            raise ValueError(f"No evaluator registered for kind: {question.kind}")
        return evaluator_class.for_question(question, tolerance=tolerance)

    def missing_kinds(self) -> list[QuestionKind]:
        """Question kinds that have no registered evaluator."""
        return [kind for kind in QuestionKind if kind not in self._evaluators]

    def get_registered_kinds(self) -> list[QuestionKind]:
        return list(self._evaluators.keys())


def _build_default_registry() -> EvaluatorRegistry:
    from .evaluators import MultiChoiceEvaluator, NumericEvaluator, SingleChoiceEvaluator

    registry = EvaluatorRegistry()
    for evaluator_class in (SingleChoiceEvaluator, MultiChoiceEvaluator, NumericEvaluator):
        registry.register(evaluator_class)

    missing = registry.missing_kinds()
    if missing:
        raise RuntimeError(f"No evaluator for question kinds: {[kind.value for kind in missing]}")
    return registry


_global_registry: EvaluatorRegistry | None = None


def get_registry() -> EvaluatorRegistry:
    """Global registry covering every question kind."""
    global _global_registry
    if _global_registry is None:
        _global_registry = _build_default_registry()
    return _global_registry


def evaluate(
    question: Question,
    answer: StudentAnswer | None,
    tolerance: float = DEFAULT_TOLERANCE,
) -> bool:
    """
    Decide whether a student answer is correct for a question.

    Args:
        question: Question with its answer specification
        answer: Student answer; None or Unanswered means not attempted
        tolerance: Absolute tolerance for numerical questions

    Returns:
        True if correct. Unanswered, mistyped and malformed answers are
        all False.
    """
    if answer is None or isinstance(answer, Unanswered):
        return False
    return get_registry().create_evaluator(question, tolerance=tolerance).evaluate(answer)
