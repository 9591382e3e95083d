"""Roster container shared by the catalog and the dream team."""

import logging
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Callable, Iterator, Optional

from .player import Player


logger = logging.getLogger(__name__)

# Game constants
MAX_SQUAD_SIZE = 10

Comparator = Callable[[Player, Player], int]


@dataclass
class SquadValidationError:
    """Represents a rule violation when picking the dream team."""

    code: str
    message: str


@dataclass
class Roster:
    """
    Ordered, index-addressable list of players.

    A roster holds references, not copies: the dream team points at the
    same Player objects as the catalog. No size limit is enforced here;
    the squad cap is a menu rule (see ``can_add_to_squad``).

    Attributes:
        players: Players in current order.
    """

    players: list[Player] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Return number of players in the roster."""
        return len(self.players)

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

    def get(self, index: int) -> Optional[Player]:
        """Get the player at ``index``, or None when out of range."""
        if 0 <= index < len(self.players):
            return self.players[index]
        return None

    def add(self, player: Player) -> None:
        """Append a player to the end of the roster."""
        self.players.append(player)

    def remove_at(self, index: int) -> Optional[Player]:
        """
        Remove the player at ``index``.

        Out-of-range indices, negative ones included, are ignored and the
        roster is left untouched.

        Returns:
            The removed player, or None if nothing was removed.
        """
        if not 0 <= index < len(self.players):
            logger.debug("Ignoring removal at index %s (size %s)", index, len(self.players))
            return None
        return self.players.pop(index)

    def contains(self, player: Player) -> bool:
        """Check whether this exact player object is in the roster."""
        return any(p is player for p in self.players)

    def sort_by(self, comparator: Comparator) -> None:
        """Reorder the roster in place using a comparator."""
        self.players.sort(key=cmp_to_key(comparator))

    def list_indexed(self) -> Iterator[tuple[int, str]]:
        """Yield ``(index, display row)`` pairs in current order."""
        for index, player in enumerate(self.players):
            yield index, str(player)
