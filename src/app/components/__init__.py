"""Reusable UI components for the scout manager application."""

from .player_table import render_player_table
from .team_status import render_team_status

__all__ = ["render_player_table", "render_team_status"]
