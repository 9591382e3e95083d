"""Comparators used to reorder a roster."""

from functools import partial

from ..models.player import Player
from ..models.roster import Comparator


def _compare(left, right) -> int:
    return (left > right) - (left < right)


def compare_by_market_value(a: Player, b: Player, ascending: bool = True) -> int:
    """Compare two players by market value."""
    if ascending:
        return _compare(a.market_value, b.market_value)
    return _compare(b.market_value, a.market_value)


def by_market_value(ascending: bool) -> Comparator:
    """Return a market value comparator with a fixed direction."""
    return partial(compare_by_market_value, ascending=ascending)


def compare_by_score(a: Player, b: Player) -> int:
    """Compare two players by score, highest first."""
    return _compare(b.stats.score, a.stats.score)


def compare_by_name(a: Player, b: Player) -> int:
    """Compare two players alphabetically by name."""
    return _compare(a.name, b.name)


VALUE_ASCENDING = by_market_value(True)
VALUE_DESCENDING = by_market_value(False)
SCORE_DESCENDING = compare_by_score
NAME_ASCENDING = compare_by_name
