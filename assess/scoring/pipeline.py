"""
Batch scoring of a test submission.

Applies the answer evaluators and the marks policy to every question of a
test, producing one Response per question in test order.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, ConfigDict

from assess.answer import DEFAULT_TOLERANCE, calculate_marks, evaluate
from assess.answers import UNANSWERED, StudentAnswer
from assess.question import TestQuestion

from .response import Response
from .summary import ResultSummary, summarize


def _lookup_answer(answers: Mapping[int, StudentAnswer | None], index: int) -> StudentAnswer:
    answer = answers.get(index)
    return UNANSWERED if answer is None else answer


def score_question(
    test_question: TestQuestion,
    index: int,
    answer: StudentAnswer,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Response:
    """
    Score a single question of a submission.

    Args:
        test_question: Question with its test-specific weighting
        index: Position of the question in the test
        answer: Submitted answer, ``UNANSWERED`` when absent
        tolerance: Absolute tolerance for numerical questions

    Returns:
        Response for the question
    """
    question = test_question.question

    if answer.is_answered:
        is_correct = evaluate(question, answer, tolerance=tolerance)
        marks_obtained = calculate_marks(
            is_correct,
            test_question.effective_marks,
            test_question.effective_negative_marks,
        )
    else:
        # Unanswered questions never incur the penalty
        is_correct = False
        marks_obtained = 0.0

    return Response(
        question_index=index,
        question_id=question.id,
        section_id=test_question.section_id,
        subsection_id=test_question.subsection_id,
        student_answer=answer,
        correct_answer=question.display_answer(),
        is_correct=is_correct,
        marks_obtained=marks_obtained,
    )


def process_answers(
    questions: Sequence[TestQuestion],
    answers: Mapping[int, StudentAnswer | None],
    tolerance: float = DEFAULT_TOLERANCE,
) -> list[Response]:
    """
    Score every question of a submission.

    Args:
        questions: Questions in test order
        answers: Sparse mapping of question index to submitted answer. A
            missing index (or a None value) means the question was not
            answered.
        tolerance: Absolute tolerance for numerical questions

    Returns:
        One Response per question, in the order of ``questions``
    """
    return [
        score_question(test_question, index, _lookup_answer(answers, index), tolerance=tolerance)
        for index, test_question in enumerate(questions)
    ]


class ScoredSubmission(BaseModel):
    """Responses of a submission together with their totals."""

    model_config = ConfigDict(frozen=True)

    responses: list[Response]
    summary: ResultSummary


def score_submission(
    questions: Sequence[TestQuestion],
    answers: Mapping[int, StudentAnswer | None],
    tolerance: float = DEFAULT_TOLERANCE,
) -> ScoredSubmission:
    """Score a submission and compute its result summary."""
    responses = process_answers(questions, answers, tolerance=tolerance)
    return ScoredSubmission(responses=responses, summary=summarize(questions, responses))
