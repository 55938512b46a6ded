"""In-memory league store and JSON league snapshots."""

from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

from simprep.errors import NotFoundError
from simprep.models.exhibition import ExhibitionRoster
from simprep.models.player import Player
from simprep.models.team import Team, TeamSeason

logger = logging.getLogger(__name__)


class LeagueSnapshot(BaseModel):
    """Everything the loader reads, as stored in a league file."""

    season: int
    teams: List[Team] = Field(default_factory=list)
    team_seasons: List[TeamSeason] = Field(default_factory=list)
    players: List[Player] = Field(default_factory=list)
    exhibition: Optional[ExhibitionRoster] = None
    user_tids: List[int] = Field(default_factory=list)
    ties: bool = False

    @classmethod
    def load(cls, path: Path) -> "LeagueSnapshot":
        return cls.model_validate_json(path.read_text(encoding="utf-8"))

    def save(self, path: Path) -> None:
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")


class MemoryLeagueStore:
    """Read-only store over in-memory entities.

    Also serves exhibition rosters: the stored roster is taken as the finished
    draft, so ``draft_all`` only marks it finalized.
    """

    def __init__(
        self,
        *,
        teams: Iterable[Team] = (),
        team_seasons: Iterable[TeamSeason] = (),
        players: Iterable[Player] = (),
        exhibition: Optional[ExhibitionRoster] = None,
    ):
        self._teams: Dict[int, Team] = {t.tid: t for t in teams}
        self._seasons: Dict[Tuple[int, int], TeamSeason] = {
            (ts.tid, ts.season): ts for ts in team_seasons
        }
        self._players: Dict[int, Player] = {}
        self._players_by_tid: Dict[int, List[Player]] = defaultdict(list)
        for p in players:
            self._players[p.pid] = p
            self._players_by_tid[p.tid].append(p)
        self._exhibition = exhibition

    @classmethod
    def from_snapshot(cls, snapshot: LeagueSnapshot) -> "MemoryLeagueStore":
        return cls(
            teams=snapshot.teams,
            team_seasons=snapshot.team_seasons,
            players=snapshot.players,
            exhibition=snapshot.exhibition,
        )

    async def fetch_roster(self, tid: int) -> List[Player]:
        return list(self._players_by_tid.get(tid, ()))

    async def fetch_team(self, tid: int) -> Team:
        try:
            return self._teams[tid]
        except KeyError:
            raise NotFoundError("team", tid) from None

    async def fetch_season(self, tid: int, season: int) -> TeamSeason:
        try:
            return self._seasons[(tid, season)]
        except KeyError:
            raise NotFoundError("team season", (tid, season)) from None

    async def fetch_player(self, pid: int) -> Player:
        try:
            return self._players[pid]
        except KeyError:
            raise NotFoundError("player", pid) from None

    async def get_or_create(self) -> ExhibitionRoster:
        if self._exhibition is None:
            self._exhibition = ExhibitionRoster()
        return self._exhibition

    async def draft_all(self) -> None:
        roster = await self.get_or_create()
        if not all(roster.teams):
            logger.warning("Finalizing exhibition rosters with an empty side")
        self._exhibition = roster.model_copy(update={"finalized": True})


__all__ = ["LeagueSnapshot", "MemoryLeagueStore"]
