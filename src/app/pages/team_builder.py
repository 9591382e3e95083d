"""Team builder page for browsing the catalog and picking the dream team."""

from typing import Optional

import streamlit as st

from ...models import Comparator, Player, Position, Roster, Stats
from ...analysis import (
    NAME_ASCENDING,
    SCORE_DESCENDING,
    VALUE_ASCENDING,
    VALUE_DESCENDING,
    can_add_to_squad,
)
from ..components import render_player_table, render_team_status
from ..seed import create_catalog


# Sort selector label -> comparator (None keeps the current order)
SORT_OPTIONS: dict[str, Optional[Comparator]] = {
    "Current order": None,
    "Price (ascending)": VALUE_ASCENDING,
    "Price (descending)": VALUE_DESCENDING,
    "Rating": SCORE_DESCENDING,
    "Name": NAME_ASCENDING,
}


def _init_session_state() -> None:
    """Initialize session state variables."""
    if "catalog" not in st.session_state:
        st.session_state.catalog = create_catalog()
    if "squad" not in st.session_state:
        st.session_state.squad = Roster()


def _sort_catalog(catalog: Roster, option: str) -> None:
    """Reorder the catalog for the selected sort option."""
    comparator = SORT_OPTIONS[option]
    if comparator is not None:
        catalog.sort_by(comparator)


def _build_player(
    name: str,
    nationality: str,
    age: int,
    position_label: str,
    market_value: float,
    club: str,
    speed: int,
    stamina: int,
    technique: int,
    shot_power: int,
) -> Player:
    """Build a player from the add-player form values."""
    position = next(p for p in Position if p.label == position_label)
    return Player.create(
        name,
        nationality,
        int(age),
        position,
        float(market_value),
        club,
        Stats(int(speed), int(stamina), int(technique), int(shot_power)),
    )


def _add_to_squad(index: int) -> None:
    """Add catalog player at index to the dream team if valid."""
    catalog = st.session_state.catalog
    squad = st.session_state.squad
    result = can_add_to_squad(squad, catalog, index)
    if result.is_valid:
        squad.add(catalog.players[index])
    else:
        st.error(result.message)


def _remove_from_catalog(index: int) -> None:
    """Delete a player from the catalog (the dream team keeps its reference)."""
    st.session_state.catalog.remove_at(index)


def _remove_from_squad(index: int) -> None:
    """Drop a player from the dream team."""
    st.session_state.squad.remove_at(index)


def render() -> None:
    """Render the team builder page."""
    _init_session_state()
    catalog: Roster = st.session_state.catalog
    squad: Roster = st.session_state.squad

    st.title("Dream Team Builder")
    st.divider()

    # Layout: Two columns - team on left, catalog on right
    team_col, players_col = st.columns([1, 1.5])

    with team_col:
        st.header("Dream Team")
        render_team_status(squad)

        if squad.size:
            for index, row in squad.list_indexed():
                cols = st.columns([5, 1])
                with cols[0]:
                    st.code(row, language=None)
                with cols[1]:
                    st.button(
                        "🗑️",
                        key=f"squad_remove_{index}",
                        on_click=_remove_from_squad,
                        args=(index,),
                        help="Remove from team",
                    )
        else:
            st.info("No players selected. Add players from the catalog on the right.")

    with players_col:
        st.header("Catalog")

        option = st.selectbox("Sort by", list(SORT_OPTIONS.keys()), key="sort_option")
        _sort_catalog(catalog, option)

        render_player_table(
            catalog,
            squad,
            on_add=_add_to_squad,
            on_remove=_remove_from_catalog,
        )

        st.divider()
        _render_add_player_form(catalog)


def _render_add_player_form(catalog: Roster) -> None:
    """Render the form for adding a new player to the catalog."""
    with st.expander("Add new player", expanded=False):
        added = st.session_state.pop("added_player", None)
        if added:
            st.success(f"{added} added!")

        with st.form("add_player", clear_on_submit=True):
            name = st.text_input("Name")
            nationality = st.text_input("Nationality")
            club = st.text_input("Club")

            col1, col2, col3 = st.columns(3)
            with col1:
                age = st.number_input("Age", min_value=0, value=25, step=1)
            with col2:
                position_label = st.selectbox("Position", [p.label for p in Position])
            with col3:
                market_value = st.number_input("Price (millions)", min_value=0.0, value=10.0, step=0.5)

            stat_cols = st.columns(4)
            stats = [
                stat_cols[i].number_input(label, min_value=0, value=70, step=1)
                for i, label in enumerate(("Speed", "Stamina", "Technique", "Shot power"))
            ]

            if st.form_submit_button("Add player"):
                if not name:
                    st.warning("Enter a name to add a player.")
                    return
                catalog.add(
                    _build_player(
                        name, nationality, age, position_label, market_value, club, *stats
                    )
                )
                st.session_state.added_player = name
                # Catalog was drawn above, redraw with the new row
                st.rerun()
