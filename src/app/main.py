"""Streamlit entry point: ``streamlit run src/app/main.py``."""

import sys
from pathlib import Path

# Add project root to path for direct execution
_project_root = Path(__file__).parent.parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

import streamlit as st

from src.app.pages import team_builder


def _reset_session() -> None:
    """Forget the catalog and dream team so the sample players are reloaded."""
    for key in ("catalog", "squad"):
        st.session_state.pop(key, None)


def main() -> None:
    """Run the main application."""
    st.set_page_config(
        page_title="Scout Manager",
        page_icon="⚽",
        layout="wide",
    )

    st.sidebar.title("Scout Manager")
    st.sidebar.markdown("*Pick your dream team*")
    st.sidebar.button("Reset catalog", on_click=_reset_session)

    team_builder.render()


if __name__ == "__main__":
    main()
