"""
Scoring engine for the quiz result page.

- rules: size-category bases and the lifestyle adjustment table
- engine: compute_result / explain_result
"""

from .engine import AppliedAdjustment, Result, compute_result, current_size_from, explain_result
from .rules import ADJUSTMENT_TABLE, CURRENT_SIZE_INDEX, SIZE_CATEGORY_BASE, SIZE_CATEGORY_INDEX

__all__ = [
    "AppliedAdjustment",
    "Result",
    "compute_result",
    "current_size_from",
    "explain_result",
    "ADJUSTMENT_TABLE",
    "CURRENT_SIZE_INDEX",
    "SIZE_CATEGORY_BASE",
    "SIZE_CATEGORY_INDEX",
]
