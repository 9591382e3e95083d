"""Dream team selection rules."""

from dataclasses import dataclass, field

from ..models.roster import MAX_SQUAD_SIZE, Roster, SquadValidationError


@dataclass
class ValidationResult:
    """
    Result of a validation check.

    Attributes:
        is_valid: Whether the validation passed.
        errors: List of validation errors (empty if valid).
    """

    is_valid: bool
    errors: list[SquadValidationError] = field(default_factory=list)

    @property
    def message(self) -> str:
        """First error message, or an empty string when valid."""
        return self.errors[0].message if self.errors else ""


def check_squad_capacity(squad: Roster) -> ValidationResult:
    """
    Check if the dream team has room for another player.

    Args:
        squad: The current dream team.

    Returns:
        ValidationResult with a SQUAD_FULL error when the squad is full.
    """
    if squad.size >= MAX_SQUAD_SIZE:
        return ValidationResult(
            is_valid=False,
            errors=[
                SquadValidationError(
                    code="SQUAD_FULL",
                    message=f"The team already has {MAX_SQUAD_SIZE} players!",
                )
            ],
        )
    return ValidationResult(is_valid=True)


def can_add_to_squad(squad: Roster, catalog: Roster, index: int) -> ValidationResult:
    """
    Check if the catalog player at ``index`` can join the dream team.

    Checks stop at the first failure: capacity, then index range, then
    membership.

    Args:
        squad: The current dream team.
        catalog: The full player catalog.
        index: Catalog index of the candidate.

    Returns:
        ValidationResult indicating if the add is valid.
    """
    capacity = check_squad_capacity(squad)
    if not capacity.is_valid:
        return capacity

    player = catalog.get(index)
    if player is None:
        return ValidationResult(
            is_valid=False,
            errors=[SquadValidationError(code="INVALID_INDEX", message="Invalid index!")],
        )

    if squad.contains(player):
        return ValidationResult(
            is_valid=False,
            errors=[
                SquadValidationError(
                    code="DUPLICATE_PLAYER",
                    message=f"{player.name} is already in the team!",
                )
            ],
        )

    return ValidationResult(is_valid=True)


def squad_slots_remaining(squad: Roster) -> int:
    """
    Get number of free dream team slots.

    Args:
        squad: The current dream team.

    Returns:
        Number of players that can still be added.
    """
    return max(0, MAX_SQUAD_SIZE - squad.size)
