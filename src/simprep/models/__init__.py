"""Persisted league entities and the simulation-ready state records."""

from .exhibition import EXHIBITION_TIDS, ExhibitionRoster, ExhibitionSlot
from .player import HEALTHY, Born, Injury, Player, PlayerRatings
from .state import ProcessedPlayerState, ProcessedTeamState, Synergy
from .team import ExpenseLevel, Team, TeamSeason

__all__ = [
    "EXHIBITION_TIDS",
    "HEALTHY",
    "Born",
    "ExhibitionRoster",
    "ExhibitionSlot",
    "ExpenseLevel",
    "Injury",
    "Player",
    "PlayerRatings",
    "ProcessedPlayerState",
    "ProcessedTeamState",
    "Synergy",
    "Team",
    "TeamSeason",
]
