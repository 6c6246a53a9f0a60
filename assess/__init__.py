"""
assess - answer evaluation and scoring for timed multi-question tests

Decides the correctness of submitted answers (single choice, multi choice
and numerical) and converts each decision into marks, with negative marking
for attempted wrong answers.
"""

from .answer import DEFAULT_TOLERANCE, calculate_marks, evaluate
from .answers import (
    UNANSWERED,
    MultiChoiceAnswer,
    NumericalAnswer,
    SingleChoiceAnswer,
    StudentAnswer,
    Unanswered,
    UnrecognizedAnswer,
    coerce_answer,
)
from .question import Question, QuestionKind, TestQuestion
from .scoring import (
    Response,
    ResultSummary,
    ScoredSubmission,
    process_answers,
    score_submission,
    summarize,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_TOLERANCE",
    "Question",
    "QuestionKind",
    "TestQuestion",
    "StudentAnswer",
    "SingleChoiceAnswer",
    "MultiChoiceAnswer",
    "NumericalAnswer",
    "UnrecognizedAnswer",
    "Unanswered",
    "UNANSWERED",
    "coerce_answer",
    "evaluate",
    "calculate_marks",
    "Response",
    "ResultSummary",
    "ScoredSubmission",
    "process_answers",
    "score_submission",
    "summarize",
]
