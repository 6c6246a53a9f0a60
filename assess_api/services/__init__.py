"""Services package"""

from .scoring_service import ScoringService, get_scoring_service

__all__ = [
    "ScoringService",
    "get_scoring_service",
]
