"""Player table component for displaying and selecting players."""

from typing import Callable, Optional

import streamlit as st

from ...models import Roster
from ...analysis import can_add_to_squad


def render_player_table(
    catalog: Roster,
    squad: Roster,
    on_add: Optional[Callable[[int], None]] = None,
    on_remove: Optional[Callable[[int], None]] = None,
) -> None:
    """
    Render the catalog with add and delete buttons.

    Args:
        catalog: Players to display.
        squad: Current dream team for validation context.
        on_add: Callback with the catalog index when a player is added.
        on_remove: Callback with the catalog index when a player is deleted.
    """
    if not catalog.size:
        st.info("No players to display.")
        return

    for index in range(catalog.size):
        _render_player_row(index, catalog, squad, on_add, on_remove)


def _render_player_row(
    index: int,
    catalog: Roster,
    squad: Roster,
    on_add: Optional[Callable[[int], None]] = None,
    on_remove: Optional[Callable[[int], None]] = None,
) -> None:
    """Render a single player row."""
    player = catalog.players[index]
    cols = st.columns([4, 1, 1])

    # Player info
    with cols[0]:
        st.code(f"{index}. {player}", language=None)
        st.caption(f"{player.nationality} · {player.age} · {player.club or '-'}")

    # Add button
    with cols[1]:
        if on_add is not None:
            validation = can_add_to_squad(squad, catalog, index)
            st.button(
                "➕",
                key=f"add_{index}",
                disabled=not validation.is_valid,
                help=validation.message or None,
                on_click=on_add,
                args=(index,),
            )

    # Delete button
    with cols[2]:
        if on_remove is not None:
            st.button(
                "🗑️",
                key=f"remove_{index}",
                on_click=on_remove,
                args=(index,),
                help="Delete player",
            )
