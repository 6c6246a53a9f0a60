"""Submission scoring: per-question responses and result totals."""

from .pipeline import ScoredSubmission, process_answers, score_question, score_submission
from .response import Response
from .summary import ResultSummary, summarize

__all__ = [
    "Response",
    "ResultSummary",
    "ScoredSubmission",
    "process_answers",
    "score_question",
    "score_submission",
    "summarize",
]
