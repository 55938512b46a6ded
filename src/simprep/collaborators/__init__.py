"""Collaborator contracts and reference implementations."""

from .defaults import Collaborators
from .depth import depth_players
from .finances import HealthRanker, rank_last_three
from .protocols import (
    DepthAssignment,
    DepthChart,
    DepthConfig,
    ExhibitionRosters,
    HealthRank,
    LeagueStore,
    RatedPlayer,
    TeamOvr,
)
from .team_ovr import basketball_team_ovr, predicted_mov

__all__ = [
    "Collaborators",
    "DepthAssignment",
    "DepthChart",
    "DepthConfig",
    "ExhibitionRosters",
    "HealthRank",
    "HealthRanker",
    "LeagueStore",
    "RatedPlayer",
    "TeamOvr",
    "basketball_team_ovr",
    "depth_players",
    "predicted_mov",
    "rank_last_three",
]
