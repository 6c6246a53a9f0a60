"""
Answer evaluation for test questions.

Provides:
- Kind-specific evaluators (single choice, multi choice, numerical)
- Tolerance-based numeric comparison with a text fallback
- Kind-based dispatch through an evaluator registry
- Negative-marking marks calculation
"""

from .cmp import checkbox_cmp, num_cmp, radio_cmp
from .evaluator import (
    DEFAULT_TOLERANCE,
    AnswerEvaluator,
    EvaluatorRegistry,
    evaluate,
    get_registry,
)
from .evaluators import (
    MultiChoiceEvaluator,
    NumericEvaluator,
    SingleChoiceEvaluator,
    check_multiple,
    check_single,
    compare_numeric,
)
from .graders import calculate_marks

# Every question kind must have an evaluator before anything is scored
get_registry()

__all__ = [
    "DEFAULT_TOLERANCE",
    "AnswerEvaluator",
    "EvaluatorRegistry",
    "SingleChoiceEvaluator",
    "MultiChoiceEvaluator",
    "NumericEvaluator",
    "evaluate",
    "get_registry",
    "calculate_marks",
    "check_single",
    "check_multiple",
    "compare_numeric",
    # Convenience functions
    "num_cmp",
    "radio_cmp",
    "checkbox_cmp",
]
