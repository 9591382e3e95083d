"""Ordering policies and dream team rules."""

from .ordering import (
    NAME_ASCENDING,
    SCORE_DESCENDING,
    VALUE_ASCENDING,
    VALUE_DESCENDING,
    by_market_value,
    compare_by_market_value,
    compare_by_name,
    compare_by_score,
)
from .validator import (
    ValidationResult,
    can_add_to_squad,
    check_squad_capacity,
    squad_slots_remaining,
)

__all__ = [
    # Ordering
    "NAME_ASCENDING",
    "SCORE_DESCENDING",
    "VALUE_ASCENDING",
    "VALUE_DESCENDING",
    "by_market_value",
    "compare_by_market_value",
    "compare_by_name",
    "compare_by_score",
    # Validator
    "ValidationResult",
    "can_add_to_squad",
    "check_squad_capacity",
    "squad_slots_remaining",
]
