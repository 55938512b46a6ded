"""Contracts for the services the loader consumes but does not own."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Protocol, Sequence

from simprep.models.exhibition import ExhibitionRoster
from simprep.models.player import Player
from simprep.models.state import ProcessedPlayerState
from simprep.models.team import Team, TeamSeason

DepthConfig = Mapping[str, Sequence[int]]
DepthAssignment = Dict[str, List[ProcessedPlayerState]]


@dataclass(frozen=True)
class RatedPlayer:
    """Minimal player view handed to team ovr aggregation."""

    pid: int
    ovr: float
    pos: str


class LeagueStore(Protocol):
    """Read-only access to persisted league entities.

    Every method raises ``NotFoundError`` when the record is missing, except
    ``fetch_roster`` which returns an empty list for a team without players.
    """

    async def fetch_roster(self, tid: int) -> List[Player]: ...

    async def fetch_team(self, tid: int) -> Team: ...

    async def fetch_season(self, tid: int, season: int) -> TeamSeason: ...

    async def fetch_player(self, pid: int) -> Player: ...


class ExhibitionRosters(Protocol):
    async def get_or_create(self) -> ExhibitionRoster: ...

    async def draft_all(self) -> None: ...


class TeamOvr(Protocol):
    def __call__(self, players: Sequence[RatedPlayer]) -> float: ...


class HealthRank(Protocol):
    def __call__(self, seasons: Sequence[TeamSeason]) -> float: ...


class DepthChart(Protocol):
    def __call__(
        self, depth: DepthConfig, players: Sequence[ProcessedPlayerState]
    ) -> DepthAssignment: ...
