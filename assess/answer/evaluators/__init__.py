"""
Kind-specific answer evaluators.

Each module implements the evaluators for one family of question kinds.
"""

from .choice import MultiChoiceEvaluator, SingleChoiceEvaluator, check_multiple, check_single
from .numeric import NumericEvaluator, compare_numeric

__all__ = [
    "SingleChoiceEvaluator",
    "MultiChoiceEvaluator",
    "NumericEvaluator",
    "check_single",
    "check_multiple",
    "compare_numeric",
]
