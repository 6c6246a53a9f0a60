"""
Scoring service for test submissions.

Validates a submission, converts its raw answers and runs the scoring
pipeline over it.
"""

from typing import Dict

from assess import coerce_answer, score_submission, ScoredSubmission, StudentAnswer

from ..models.domain import SubmissionRequest
from ..core.config import Settings, get_settings
from ..core.errors import ScoringError, SubmissionValidationError
from ..core.logging import get_logger

logger = get_logger(__name__)


class ScoringService:
    """
    Service for submission scoring operations.

    Evaluates every answer of a submission and totals the marks.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

        logger.info("ScoringService initialized")

    def _coerce_answers(self, request: SubmissionRequest) -> Dict[int, StudentAnswer]:
        """
        Validate answer indices and convert raw values to answer variants.

        Raises:
            SubmissionValidationError: If an answer refers to no question
        """
        num_questions = len(request.questions)
        out_of_range = sorted(i for i in request.answers if not 0 <= i < num_questions)
        if out_of_range:
            raise SubmissionValidationError(
                f"Answers given for unknown question indices: {out_of_range}",
                field="answers",
                indices=out_of_range,
                num_questions=num_questions,
            )

        answers: Dict[int, StudentAnswer] = {}
        for index, raw in request.answers.items():
            answer = coerce_answer(raw)
            if answer.kind == "unrecognized":
                logger.warning(
                    "Unrecognized answer shape",
                    extra_data={"question_index": index, "raw_type": type(raw).__name__}
                )
            answers[index] = answer
        return answers

    async def score(self, request: SubmissionRequest) -> ScoredSubmission:
        """
        Score a submission.

        Args:
            request: Questions in test order and raw answers by index

        Returns:
            Responses in test order and the result summary

        Raises:
            SubmissionValidationError: If the submission is malformed
            ScoringError: If scoring fails
        """
        num_questions = len(request.questions)
        if num_questions > self.settings.MAX_QUESTIONS_PER_SUBMISSION:
            raise SubmissionValidationError(
                f"Too many questions ({num_questions}, max "
                f"{self.settings.MAX_QUESTIONS_PER_SUBMISSION})",
                field="questions",
            )

        answers = self._coerce_answers(request)
        tolerance = (
            request.tolerance
            if request.tolerance is not None
            else self.settings.NUMERIC_TOLERANCE
        )

        logger.info(
            "Scoring submission",
            extra_data={
                "num_questions": num_questions,
                "num_answers": len(answers),
                "tolerance": tolerance,
            }
        )

        try:
            result = score_submission(request.questions, answers, tolerance=tolerance)
        except Exception as e:
            logger.error(
                "Failed to score submission",
                extra_data={"num_questions": num_questions, "error": str(e)}
            )
            raise ScoringError(str(e)) from e

        logger.info(
            "Scoring completed",
            extra_data={
                "total_marks_obtained": result.summary.total_marks_obtained,
                "total_marks_possible": result.summary.total_marks_possible,
                "correct_answers": result.summary.correct_answers,
            }
        )

        return result


# Factory function
def get_scoring_service(settings: Settings | None = None) -> ScoringService:
    """Create scoring service instance"""
    return ScoringService(settings)
