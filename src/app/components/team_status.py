"""Team status component showing dream team size."""

import streamlit as st

from ...models import CURRENCY_SYMBOL, MAX_SQUAD_SIZE, Roster, format_market_value
from ...analysis import squad_slots_remaining


def render_team_status(squad: Roster) -> None:
    """
    Render dream team status metrics.

    Args:
        squad: The dream team to display status for.
    """
    slots_remaining = squad_slots_remaining(squad)
    total_value = sum(p.market_value for p in squad)

    col1, col2 = st.columns(2)
    with col1:
        st.metric(
            label="Squad Size",
            value=f"{squad.size} / {MAX_SQUAD_SIZE}",
            delta=f"{slots_remaining} slots" if slots_remaining > 0 else "Full",
            delta_color="off",
        )
    with col2:
        st.metric(label="Total Value", value=f"{CURRENCY_SYMBOL}{format_market_value(total_value)}M")

    st.progress(min(squad.size / MAX_SQUAD_SIZE, 1.0))
