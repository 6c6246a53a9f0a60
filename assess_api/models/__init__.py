"""API models package"""

from .domain import SubmissionRequest, SubmissionResult

__all__ = [
    "SubmissionRequest",
    "SubmissionResult",
]
