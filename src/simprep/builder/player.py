"""Build one simulation-ready player record."""

from __future__ import annotations

from typing import Mapping

from simprep.context import LeagueContext
from simprep.models.player import HEALTHY, Player
from simprep.models.state import ProcessedPlayerState
from simprep.ratings.composite import USAGE, CompositeWeightTable
from simprep.ratings.playoffs import apply_playoff_adjustment

USAGE_EXPONENT = 1.9
NEUTRAL_PT_MODIFIER = 1.0


def build_player_state(
    player: Player,
    *,
    weights: CompositeWeightTable,
    player_stats: Mapping[str, float],
    context: LeagueContext,
    user_team: bool,
) -> ProcessedPlayerState:
    ratings = player.latest_ratings

    composite = weights.rate(ratings)
    if context.in_playoffs:
        apply_playoff_adjustment(composite, ratings.ovr)
    # Applied after the playoff adjustment so the exponent sees the adjusted value.
    if context.basketball and USAGE in composite:
        composite[USAGE] = composite[USAGE] ** USAGE_EXPONENT

    stat = {**player_stats, "court_time": 0, "bench_time": 0, "energy": 1}

    return ProcessedPlayerState(
        id=player.pid,
        name=player.name,
        age=context.season - player.born.year,
        pos=ratings.pos,
        value_no_pot=player.value_no_pot,
        stat=stat,
        composite_rating=weights.ratings_from(composite),
        skills=tuple(ratings.skills),
        injury=player.injury,
        injured=player.injury.type != HEALTHY,
        # Only human-controlled teams keep a custom playing time setting.
        pt_modifier=player.pt_modifier if user_team else NEUTRAL_PT_MODIFIER,
        ovrs=dict(ratings.ovrs),
    )
