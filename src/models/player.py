"""Player data model for the scout manager."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import IntEnum


# Display constants
CURRENCY_SYMBOL = "€"
NAME_WIDTH = 15
ROLE_WIDTH = 10


class Position(IntEnum):
    """Playing role. Values are the codes typed at the menu."""

    GOALKEEPER = 1
    DEFENDER = 2
    MIDFIELDER = 3
    STRIKER = 4

    @property
    def label(self) -> str:
        """Human readable role name."""
        return self.name.title()


@dataclass(frozen=True)
class Stats:
    """
    Raw skill attributes of a player.

    Attributes:
        speed: Pace rating.
        stamina: Endurance rating.
        technique: Ball control rating.
        shot_power: Shooting strength rating.
    """

    speed: int
    stamina: int
    technique: int
    shot_power: int

    @property
    def score(self) -> float:
        """Mean of the four attributes."""
        return (self.speed + self.stamina + self.technique + self.shot_power) / 4.0


@dataclass(frozen=True)
class Identity:
    """Personal details of a player."""

    name: str
    nationality: str
    age: int


@dataclass(frozen=True, eq=False)
class Player:
    """
    Represents a player in the catalog.

    Players compare by identity: two players built from the same values
    are still two different players.

    Attributes:
        identity: Name, nationality and age.
        position: Playing role.
        market_value: Price in millions.
        club: Current club, may be empty.
        stats: Skill attributes owned by this player.
    """

    identity: Identity
    position: Position
    market_value: float
    club: str
    stats: Stats

    @classmethod
    def create(
        cls,
        name: str,
        nationality: str,
        age: int,
        position: Position,
        market_value: float,
        club: str,
        stats: Stats,
    ) -> "Player":
        """Build a player from already parsed field values."""
        return cls(
            identity=Identity(name=name, nationality=nationality, age=age),
            position=position,
            market_value=market_value,
            club=club,
            stats=stats,
        )

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def nationality(self) -> str:
        return self.identity.nationality

    @property
    def age(self) -> int:
        return self.identity.age

    def __str__(self) -> str:
        return (
            f"{self.name:<{NAME_WIDTH}} | {self.position.label:<{ROLE_WIDTH}} | "
            f"Rating: {format_rating(self.stats.score)} | "
            f"{CURRENCY_SYMBOL}{format_market_value(self.market_value)}M"
        )


def format_rating(score: float) -> str:
    """Format a score to one decimal place, rounding halves away from zero."""
    return str(Decimal(score).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_market_value(value: float) -> str:
    """Format a market value without a trailing ``.0`` (180.0 -> '180', 1e16 -> '1E+16')."""
    text = repr(float(value)).replace("e", "E")
    if text.endswith(".0"):
        return text[:-2]
    return text
