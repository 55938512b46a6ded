"""Build one simulation-ready team record from its roster and season."""

from __future__ import annotations

import logging
from typing import List, Mapping, Sequence

from simprep.builder.player import build_player_state
from simprep.collaborators.defaults import Collaborators
from simprep.collaborators.protocols import RatedPlayer
from simprep.context import LeagueContext
from simprep.models.player import Player
from simprep.models.state import ProcessedPlayerState, ProcessedTeamState, Synergy
from simprep.models.team import Team, TeamSeason
from simprep.ratings.composite import PACE, CompositeWeightTable
from simprep.requests import TeamRequest

logger = logging.getLogger(__name__)

# Rotation size used for the pace average.
PACE_PLAYERS = 7
PACE_SCALE = 15
PACE_BASE = 100.0
EXHIBITION_PACE_FACTOR = 1.15


def team_pace(players: Sequence[ProcessedPlayerState], *, exhibition: bool = False) -> float:
    """Aggregate pace of the first few rotation players, between 100 and 115.

    An empty roster has no average; it gets the bottom of the range.
    """

    rotation = players[:PACE_PLAYERS]
    if rotation:
        mean = sum(p.composite_rating[PACE] for p in rotation) / len(rotation)
        pace = mean * PACE_SCALE + PACE_BASE
    else:
        logger.warning("No players to average pace over; using %.1f", PACE_BASE)
        pace = PACE_BASE

    if exhibition:
        pace *= EXHIBITION_PACE_FACTOR
    return pace


def fit_players(players: Sequence[Player]) -> List[RatedPlayer]:
    """Players with no games left on an injury, as seen by team ovr."""

    return [
        RatedPlayer(pid=p.pid, ovr=p.latest_ratings.ovr, pos=p.latest_ratings.pos)
        for p in players
        if p.is_fit
    ]


def build_team_state(
    request: TeamRequest,
    team: Team,
    season: TeamSeason,
    players: Sequence[Player],
    *,
    weights: CompositeWeightTable,
    player_stats: Mapping[str, float],
    team_stats: Mapping[str, float],
    context: LeagueContext,
    collaborators: Collaborators,
) -> ProcessedTeamState:
    roster = list(players)
    if not request.exhibition:
        roster.sort(key=lambda p: p.roster_order)

    ovr = collaborators.team_ovr(fit_players(roster))

    user_team = context.is_user_team(team.tid)
    built = [
        build_player_state(
            p,
            weights=weights,
            player_stats=player_stats,
            context=context,
            user_team=user_team,
        )
        for p in roster
    ]

    depth = None
    if team.depth is not None:
        depth = collaborators.depth_chart(team.depth, built)

    return ProcessedTeamState(
        id=team.tid,
        cid=team.cid,
        did=team.did,
        won=season.won,
        lost=season.lost,
        tied=season.tied if context.ties else None,
        ovr=ovr,
        pace=team_pace(built, exhibition=request.exhibition),
        stat={**team_stats, "pts": 0, "pts_qtrs": [0]},
        player=built,
        health_rank=collaborators.rank_health([season], num_teams=context.num_teams),
        composite_rating=weights.zeroed(),
        synergy=Synergy(),
        depth=depth,
    )
