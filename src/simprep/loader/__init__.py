"""Orchestration: fetch the requested teams and build their states."""

from .service import TeamStateLoader, exhibition_season, exhibition_team, load_team_states

__all__ = ["TeamStateLoader", "exhibition_season", "exhibition_team", "load_team_states"]
