"""Builders turning persisted entities into simulation-ready records."""

from .player import build_player_state
from .team import build_team_state, fit_players, team_pace

__all__ = ["build_player_state", "build_team_state", "fit_players", "team_pace"]
