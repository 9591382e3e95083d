"""Line-based prompts for reading player data from the terminal."""

from typing import Callable

from ..models import Player, Position, Stats


class InputError(Exception):
    """Raised when a typed value cannot be parsed."""

    pass


class Prompter:
    """
    Reads single values from a line-oriented input source.

    Args:
        input_fn: Called with a prompt, returns the typed line.
        output_fn: Called with a line of text to show.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.input_fn = input_fn
        self.output_fn = output_fn

    def text(self, prompt: str) -> str:
        """Read a line of text as typed."""
        return self.input_fn(prompt)

    def integer(self, prompt: str) -> int:
        """Read a whole number."""
        raw = self.input_fn(prompt)
        try:
            return int(raw.strip())
        except ValueError:
            raise InputError(f"'{raw}' is not a whole number") from None

    def decimal(self, prompt: str) -> float:
        """Read a decimal number."""
        raw = self.input_fn(prompt)
        try:
            return float(raw.strip())
        except ValueError:
            raise InputError(f"'{raw}' is not a number") from None

    def position(self) -> Position:
        """Read a role code (1-4)."""
        codes = " ".join(f"{p.value}-{p.label}" for p in Position)
        self.output_fn(f"Position: {codes}")
        code = self.integer("")
        try:
            return Position(code)
        except ValueError:
            raise InputError(f"Unknown position code: {code}") from None

    def read_player(self) -> Player:
        """
        Read all fields of a new player.

        Returns:
            The new Player.

        Raises:
            InputError: If a numeric field or the role code is malformed.
        """
        name = self.text("Name: ")
        nationality = self.text("Nationality: ")
        age = self.integer("Age: ")
        position = self.position()
        market_value = self.decimal("Price (millions): ")
        club = self.text("Club: ")

        stats = Stats(
            speed=self.integer("Speed: "),
            stamina=self.integer("Stamina: "),
            technique=self.integer("Technique: "),
            shot_power=self.integer("Shot power: "),
        )
        return Player.create(name, nationality, age, position, market_value, club, stats)
