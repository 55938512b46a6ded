"""League-wide context threaded through the loader and builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import FrozenSet


class Phase(IntEnum):
    EXPANSION_DRAFT = -2
    FANTASY_DRAFT = -1
    PRESEASON = 0
    REGULAR_SEASON = 1
    AFTER_TRADE_DEADLINE = 2
    PLAYOFFS = 3
    DRAFT_LOTTERY = 4
    DRAFT = 5
    AFTER_DRAFT = 6
    RESIGN_PLAYERS = 7
    FREE_AGENCY = 8


@dataclass(frozen=True)
class LeagueContext:
    """Snapshot of the league state a load runs against.

    ``user_tids`` holds the teams controlled by a human, ``basketball`` turns on
    the basketball-only usage emphasis and ``ties`` controls whether team
    records carry a tied count. ``num_teams`` feeds the default health rank
    used when a team has no season history.
    """

    season: int
    phase: Phase = Phase.REGULAR_SEASON
    user_tids: FrozenSet[int] = field(default_factory=frozenset)
    basketball: bool = True
    ties: bool = False
    num_teams: int = 30

    @property
    def in_playoffs(self) -> bool:
        return self.phase == Phase.PLAYOFFS

    def is_user_team(self, tid: int) -> bool:
        return tid in self.user_tids


__all__ = ["LeagueContext", "Phase"]
