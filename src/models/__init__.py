"""Data models for the scout manager."""

from .player import (
    CURRENCY_SYMBOL,
    Identity,
    Player,
    Position,
    Stats,
    format_market_value,
    format_rating,
)
from .roster import MAX_SQUAD_SIZE, Comparator, Roster, SquadValidationError

__all__ = [
    # Player
    "CURRENCY_SYMBOL",
    "Identity",
    "Player",
    "Position",
    "Stats",
    "format_market_value",
    "format_rating",
    # Roster
    "MAX_SQUAD_SIZE",
    "Comparator",
    "Roster",
    "SquadValidationError",
]
