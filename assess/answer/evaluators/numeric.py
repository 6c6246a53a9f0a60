"""
Numeric answer evaluator.

Compares numerical answers with an absolute tolerance. Answers that do not
parse as numbers fall back to a case-insensitive text comparison, so a
"numerical" question whose key is textual can still be matched exactly.

Values are compared as decimals rather than binary floats: a submitted
"98.0001" against a key of "98" differs by exactly 0.0001, and the
tolerance boundary is inclusive.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from assess.answers import NumericalAnswer
from assess.question import Question, QuestionKind

from ..evaluator import DEFAULT_TOLERANCE, AnswerEvaluator


def _parse_number(text: str) -> Decimal | None:
    """Parse a trimmed numeric string, None if it is not a finite number."""
    # Decimal also takes non-ASCII digits and "_" separators
    if not text.isascii() or "_" in text:
        return None
    try:
        value = Decimal(text)
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite():
        return None
    return value


def compare_numeric(student: str, correct: str, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """
    Compare two numeric answer strings.

    Args:
        student: Student's answer
        correct: Correct answer
        tolerance: Maximum absolute difference, inclusive

    Returns:
        True if both parse and differ by at most ``tolerance``, or if either
        fails to parse and the trimmed strings match case-insensitively

    Examples:
        >>> compare_numeric("98.0001", "98")
        True
        >>> compare_numeric(" ABC ", "abc")
        True
    """
    student = student.strip()
    correct = correct.strip()

    student_value = _parse_number(student)
    correct_value = _parse_number(correct)

    if student_value is None or correct_value is None:
        return student.lower() == correct.lower()

    try:
        difference = abs(student_value - correct_value)
    except ArithmeticError:
        # Exponents beyond the decimal context range
        return student.lower() == correct.lower()

    # repr() of a float is its shortest round-trip form, so 1e-4 becomes 0.0001
    limit = Decimal(repr(float(tolerance)))
    if limit.is_nan():
        return False
    return difference <= limit


class NumericEvaluator(AnswerEvaluator):
    """Evaluator for numerical questions."""

    question_kind = QuestionKind.NUMERICAL
    answer_type = NumericalAnswer

    correct_answer: str | None = None

    @classmethod
    def for_question(cls, question: Question, tolerance: float = DEFAULT_TOLERANCE) -> NumericEvaluator:
        return cls(correct_answer=question.correct_answer, tolerance=tolerance)

    def check(self, answer: NumericalAnswer) -> bool:
        # An absent or empty key matches nothing
        if not self.correct_answer:
            return False
        return compare_numeric(answer.value, self.correct_answer, self.tolerance)
