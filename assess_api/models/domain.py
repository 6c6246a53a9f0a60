"""
Request and response models for the scoring API.

Questions and scored responses reuse the engine's models; submitted answers
arrive as raw JSON values and are converted to answer variants by the
scoring service.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from assess import Response, ResultSummary, TestQuestion


class SubmissionRequest(BaseModel):
    """A completed test attempt to be scored"""
    questions: List[TestQuestion] = Field(..., description="Questions in test order")
    answers: Dict[int, Any] = Field(
        default_factory=dict,
        description="Raw answers by zero-based question index: option index, list of option indices, or numeric string"
    )
    tolerance: Optional[float] = Field(
        None,
        ge=0,
        description="Absolute tolerance for numerical questions (defaults to NUMERIC_TOLERANCE)"
    )


class SubmissionResult(BaseModel):
    """Scored submission"""
    responses: List[Response]
    summary: ResultSummary
