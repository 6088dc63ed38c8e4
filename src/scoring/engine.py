"""
Scoring Engine - turns a completed answer map into the personalised result.

The formula is additive: a base increase chosen by the size category, one
adjustment per lifestyle answer, clamped to realistic bounds and rounded
half-up. The engine is pure; it reads constants from ``config.scoring``
and never mutates its input.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Mapping, Optional

from .rules import ADJUSTMENT_TABLE, CURRENT_SIZE_INDEX, SIZE_CATEGORY_BASE, SIZE_CATEGORY_INDEX

try:
    from ..config import ScoringConfig, config
    from ..utils.validation import parse_number
except ImportError:
    from src.config import ScoringConfig, config
    from src.utils.validation import parse_number


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    """
    Personalised quiz result.

    Attributes:
        current_size: Size reported by the user (cm)
        potential_increase: Projected increase (cm), within the configured bounds
        potential_size: current_size + potential_increase
        success_rate: Program success rate (%)
        time_required: Daily practice time (minutes)
        program_duration: Program length (days)
    """

    current_size: float
    potential_increase: int
    potential_size: float
    success_rate: int
    time_required: int
    program_duration: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class AppliedAdjustment:
    """One lifestyle adjustment that contributed to the increase."""

    index: int
    factor: str
    value: str
    delta: float


def _round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def current_size_from(answers: Mapping[int, str], settings: Optional[ScoringConfig] = None) -> float:
    """Reported size, or the configured default when missing or not a number."""
    settings = settings or config.scoring
    value = parse_number(answers.get(CURRENT_SIZE_INDEX))
    return settings.default_size if value is None else value


def explain_result(answers: Mapping[int, str]) -> List[AppliedAdjustment]:
    """
    List the adjustments an answer map triggers, in application order.

    Args:
        answers: Question index -> answer value

    Returns:
        Applied adjustments (answers without an entry in the table are omitted)
    """
    applied = []
    for index, factor, deltas in ADJUSTMENT_TABLE:
        value = answers.get(index)
        if value in deltas:
            applied.append(AppliedAdjustment(index=index, factor=factor, value=value, delta=deltas[value]))
    return applied


def compute_result(answers: Mapping[int, str], settings: Optional[ScoringConfig] = None) -> Result:
    """
    Compute the personalised result for an answer map.

    The answer map does not have to be complete: a missing size answer
    falls back to ``default_size`` and missing categorical answers simply
    skip their adjustment.

    Args:
        answers: Question index -> answer value
        settings: Scoring constants (default: config.scoring)

    Returns:
        Result
    """
    settings = settings or config.scoring

    current_size = current_size_from(answers, settings)

    increase = SIZE_CATEGORY_BASE.get(answers.get(SIZE_CATEGORY_INDEX), settings.base_increase)
    for adjustment in explain_result(answers):
        increase += adjustment.delta

    increase = max(settings.min_increase, min(settings.max_increase, increase))
    potential_increase = _round_half_up(increase)

    result = Result(
        current_size=current_size,
        potential_increase=potential_increase,
        potential_size=current_size + potential_increase,
        success_rate=settings.success_rate,
        time_required=settings.time_required,
        program_duration=settings.program_duration,
    )
    logger.debug("Computed result %s", result)
    return result
