"""Sample players loaded into the catalog at startup."""

from ..models import Player, Position, Roster, Stats


def create_sample_players() -> list[Player]:
    """
    Create the starting catalog of players.

    Returns:
        List of sample Player objects.
    """
    return [
        Player.create(
            "Mbappe", "France", 25, Position.STRIKER, 180, "PSG",
            Stats(speed=98, stamina=85, technique=90, shot_power=92),
        ),
        Player.create(
            "Haaland", "Norway", 24, Position.STRIKER, 170, "Man City",
            Stats(speed=90, stamina=88, technique=85, shot_power=96),
        ),
        Player.create(
            "Salah", "Egypt", 31, Position.STRIKER, 90, "Liverpool",
            Stats(speed=93, stamina=85, technique=88, shot_power=90),
        ),
        Player.create(
            "Messi", "Argentina", 36, Position.MIDFIELDER, 50, "Inter Miami",
            Stats(speed=78, stamina=80, technique=98, shot_power=85),
        ),
        Player.create(
            "De Bruyne", "Belgium", 33, Position.MIDFIELDER, 90, "Man City",
            Stats(speed=75, stamina=90, technique=95, shot_power=88),
        ),
        Player.create(
            "Van Dijk", "Netherlands", 32, Position.DEFENDER, 80, "Liverpool",
            Stats(speed=70, stamina=85, technique=80, shot_power=75),
        ),
        Player.create(
            "Courtois", "Belgium", 31, Position.GOALKEEPER, 45, "Real Madrid",
            Stats(speed=60, stamina=90, technique=70, shot_power=65),
        ),
    ]


def create_catalog(seed: bool = True) -> Roster:
    """Create the catalog roster, optionally loaded with the sample players."""
    catalog = Roster()
    if seed:
        for player in create_sample_players():
            catalog.add(player)
    return catalog
