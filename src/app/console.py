"""Terminal menu for managing the catalog and the dream team."""

import argparse
import logging
from typing import Callable, Optional

from ..analysis import (
    NAME_ASCENDING,
    SCORE_DESCENDING,
    VALUE_ASCENDING,
    VALUE_DESCENDING,
    can_add_to_squad,
    check_squad_capacity,
)
from ..models import MAX_SQUAD_SIZE, Comparator, Roster
from .prompts import InputError, Prompter
from .seed import create_catalog


logger = logging.getLogger(__name__)

MENU = (
    "=== FOOTBALL SCOUT MANAGER ===",
    "1. Show all players",
    "2. Add new player",
    "3. Delete player",
    f"4. Add player to the team (max {MAX_SQUAD_SIZE})",
    "5. Show dream team",
    "6. Sort by price (ascending)",
    "7. Sort by price (descending)",
    "8. Sort by rating",
    "9. Sort by name",
    "0. Exit",
    "",
)

# Menu choice -> (comparator, header)
SORT_CHOICES: dict[str, tuple[Comparator, str]] = {
    "6": (VALUE_ASCENDING, "Sorted by price (ascending):"),
    "7": (VALUE_DESCENDING, "Sorted by price (descending):"),
    "8": (SCORE_DESCENDING, "Sorted by rating:"),
    "9": (NAME_ASCENDING, "Sorted by name:"),
}


class ConsoleShell:
    """
    Read-act-display loop over a catalog and a dream team.

    Args:
        catalog: All known players.
        squad: The dream team, holding references into the catalog.
        input_fn: Called with a prompt, returns the typed line.
        output_fn: Called with a line of text to show.
    """

    def __init__(
        self,
        catalog: Roster,
        squad: Roster,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.catalog = catalog
        self.squad = squad
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.prompter = Prompter(input_fn, output_fn)

    def run(self) -> None:
        """Run the menu until the user exits or input ends."""
        try:
            while True:
                self.show_menu()
                choice = self.input_fn("Choice: ").strip()
                if choice == "0":
                    return
                self.dispatch(choice)
                self.input_fn("\nPress Enter...")
        except EOFError:
            logger.info("Input closed, leaving menu")

    def show_menu(self) -> None:
        for line in MENU:
            self.output_fn(line)

    def dispatch(self, choice: str) -> None:
        """Run a single menu action."""
        actions: dict[str, Callable[[], None]] = {
            "1": self.show_catalog,
            "2": self.add_player,
            "3": self.remove_player,
            "4": self.add_to_squad,
            "5": self.show_squad,
        }
        try:
            if choice in actions:
                actions[choice]()
            elif choice in SORT_CHOICES:
                comparator, header = SORT_CHOICES[choice]
                self.sort_catalog(comparator, header)
            else:
                self.output_fn("Invalid choice!")
        except InputError as exc:
            self.output_fn(f"Invalid input: {exc}")

    def show_catalog(self) -> None:
        _print_roster(self.catalog, self.output_fn)

    def add_player(self) -> None:
        player = self.prompter.read_player()
        self.catalog.add(player)
        logger.info("Added %s to catalog", player.name)
        self.output_fn("✔ Player added!")

    def remove_player(self) -> None:
        """Delete a catalog entry. Out-of-range indices are silently ignored."""
        self.show_catalog()
        index = self.prompter.integer("Index to delete: ")
        removed = self.catalog.remove_at(index)
        if removed is not None:
            logger.info("Removed %s from catalog", removed.name)
        self.output_fn("✔ Player deleted!")

    def add_to_squad(self) -> None:
        capacity = check_squad_capacity(self.squad)
        if not capacity.is_valid:
            self.output_fn(f"❌ {capacity.message}")
            return

        self.show_catalog()
        index = self.prompter.integer("Index to add: ")
        result = can_add_to_squad(self.squad, self.catalog, index)
        if not result.is_valid:
            self.output_fn(f"❌ {result.message}")
            return

        player = self.catalog.players[index]
        self.squad.add(player)
        logger.info("Added %s to dream team (%s/%s)", player.name, self.squad.size, MAX_SQUAD_SIZE)
        self.output_fn("✔ Added to the team!")

    def show_squad(self) -> None:
        self.output_fn(f"=== DREAM TEAM ({self.squad.size}/{MAX_SQUAD_SIZE}) ===")
        _print_roster(self.squad, self.output_fn)

    def sort_catalog(self, comparator: Comparator, header: str) -> None:
        self.catalog.sort_by(comparator)
        self.output_fn(header)
        self.show_catalog()


def _print_roster(roster: Roster, output_fn: Callable[[str], None]) -> None:
    for index, row in roster.list_indexed():
        output_fn(f"{index}. {row}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Football scout manager")
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start with an empty catalog instead of the sample players",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ``scout-manager`` command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    catalog = create_catalog(seed=not args.no_seed)
    shell = ConsoleShell(catalog, Roster())
    shell.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
