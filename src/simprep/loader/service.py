"""Load the teams playing a game into simulation-ready state."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Dict, List, Optional, Sequence

from simprep.builder.team import build_team_state
from simprep.collaborators.defaults import Collaborators
from simprep.collaborators.protocols import ExhibitionRosters, LeagueStore
from simprep.config.league import LeagueConfig
from simprep.context import LeagueContext
from simprep.errors import ConfigurationError
from simprep.models.exhibition import ExhibitionRoster
from simprep.models.player import Player
from simprep.models.state import ProcessedTeamState
from simprep.models.team import ExpenseLevel, Team, TeamSeason
from simprep.requests import ExhibitionSide, RegularTeam, TeamRequest, resolve_requests

logger = logging.getLogger(__name__)

EXHIBITION_CONFERENCE = -1
EXHIBITION_DIVISION = -1


async def join(*aws: Awaitable[Any]) -> List[Any]:
    """Await all of ``aws`` concurrently; the first failure cancels the rest."""

    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


def exhibition_team(side: ExhibitionSide) -> Team:
    return Team(tid=side.tid, cid=EXHIBITION_CONFERENCE, did=EXHIBITION_DIVISION)


def exhibition_season(side: ExhibitionSide, season: int) -> TeamSeason:
    return TeamSeason(
        tid=side.tid,
        season=season,
        won=0,
        lost=0,
        tied=0,
        expenses={"health": ExpenseLevel(rank=1)},
    )


class TeamStateLoader:
    """Fetch and build every team a game needs.

    Store reads are the only suspension points; fetches for different teams run
    concurrently and the three reads for one team are joined before it is built.
    Any failed read aborts the whole load.
    """

    def __init__(
        self,
        store: LeagueStore,
        config: LeagueConfig,
        *,
        exhibition: Optional[ExhibitionRosters] = None,
        collaborators: Optional[Collaborators] = None,
    ):
        self.store = store
        self.config = config
        self.exhibition = exhibition
        self.collaborators = collaborators or Collaborators()
        # Zeroed once per loader; every record gets its own copy.
        self._player_stats = config.zeroed_player_stats()
        self._team_stats = config.zeroed_team_stats()

    async def load(
        self, tids: Sequence[int], context: LeagueContext
    ) -> Dict[int, ProcessedTeamState]:
        requests = resolve_requests(tids)
        if all(isinstance(r, ExhibitionSide) for r in requests):
            built = await self._load_exhibition(requests, context)
        else:
            built = await join(
                *(self._load_regular(r, context) for r in requests)
            )
        return {request.tid: state for request, state in zip(requests, built)}

    def _build(
        self,
        request: TeamRequest,
        team: Team,
        season: TeamSeason,
        players: Sequence[Player],
        context: LeagueContext,
    ) -> ProcessedTeamState:
        return build_team_state(
            request,
            team,
            season,
            players,
            weights=self.config.weights,
            player_stats=self._player_stats,
            team_stats=self._team_stats,
            context=context,
            collaborators=self.collaborators,
        )

    async def _load_regular(
        self, request: RegularTeam, context: LeagueContext
    ) -> ProcessedTeamState:
        players, team, season = await join(
            self.store.fetch_roster(request.tid),
            self.store.fetch_team(request.tid),
            self.store.fetch_season(request.tid, context.season),
        )
        logger.debug("Loaded team %d with %d players", request.tid, len(players))
        return self._build(request, team, season, players, context)

    async def _exhibition_roster(self) -> ExhibitionRoster:
        if self.exhibition is None:
            raise ConfigurationError("exhibition game requested but no exhibition roster source is set")
        roster = await self.exhibition.get_or_create()
        if not roster.finalized:
            logger.debug("Exhibition rosters not finalized; drafting remaining players")
            await self.exhibition.draft_all()
            roster = await self.exhibition.get_or_create()
        return roster

    async def _fetch_side(
        self, roster: ExhibitionRoster, request: ExhibitionSide
    ) -> List[Player]:
        players = await join(
            *(self.store.fetch_player(slot.pid) for slot in roster.teams[request.side])
        )
        return list(players)

    async def _load_exhibition(
        self, requests: List[ExhibitionSide], context: LeagueContext
    ) -> List[ProcessedTeamState]:
        roster = await self._exhibition_roster()

        rosters = await join(
            *(self._fetch_side(roster, request) for request in requests)
        )

        return [
            self._build(
                request,
                exhibition_team(request),
                exhibition_season(request, context.season),
                players,
                context,
            )
            for request, players in zip(requests, rosters)
        ]


async def load_team_states(
    tids: Sequence[int],
    *,
    store: LeagueStore,
    config: LeagueConfig,
    context: LeagueContext,
    exhibition: Optional[ExhibitionRosters] = None,
    collaborators: Optional[Collaborators] = None,
) -> Dict[int, ProcessedTeamState]:
    """Load the requested teams, keyed by team id."""

    loader = TeamStateLoader(
        store, config, exhibition=exhibition, collaborators=collaborators
    )
    return await loader.load(tids, context)
