"""Per-game stat schemas seeded at zero before every game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from simprep.errors import ConfigurationError

# Player accumulators that exist even when the raw schema omits them.
PLAYER_SEED_STATS: Tuple[str, ...] = ("gs", "min")
# Games played is tracked by the season aggregation, not per game.
PLAYER_SKIPPED_STATS = frozenset({"gp"})

BASKETBALL_PLAYER_STATS: Tuple[str, ...] = (
    "gp", "gs", "min", "fg", "fga", "fg_at_rim", "fga_at_rim", "fg_low_post",
    "fga_low_post", "fg_mid_range", "fga_mid_range", "tp", "tpa", "ft", "fta",
    "pm", "orb", "drb", "ast", "tov", "stl", "blk", "ba", "pf", "pts",
    "dd", "td", "qd", "fxf",
)

BASKETBALL_TEAM_STATS: Tuple[str, ...] = (
    "min", "fg", "fga", "fg_at_rim", "fga_at_rim", "fg_low_post", "fga_low_post",
    "fg_mid_range", "fga_mid_range", "tp", "tpa", "ft", "fta", "orb", "drb",
    "ast", "tov", "stl", "blk", "ba", "pf", "pts", "opp_pts",
)


@dataclass(frozen=True)
class StatSchema:
    player: Tuple[str, ...]
    team: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.player:
            raise ConfigurationError("player stat schema is empty")
        if not self.team:
            raise ConfigurationError("team stat schema is empty")
        for kind, names in (("player", self.player), ("team", self.team)):
            if len(set(names)) != len(names):
                raise ConfigurationError(f"{kind} stat schema has duplicate names")

    def zeroed_player_stats(self) -> Dict[str, float]:
        stats: Dict[str, float] = {name: 0 for name in PLAYER_SEED_STATS}
        for name in self.player:
            if name in PLAYER_SKIPPED_STATS:
                continue
            stats[name] = 0
        return stats

    def zeroed_team_stats(self) -> Dict[str, float]:
        return {name: 0 for name in self.team}


_STAT_SCHEMAS: Dict[str, StatSchema] = {
    "BASKETBALL": StatSchema(player=BASKETBALL_PLAYER_STATS, team=BASKETBALL_TEAM_STATS),
}


def get_stat_schema(sport: str) -> StatSchema:
    """Fetch the stat schema for a sport, raising KeyError if missing."""

    key = sport.upper()
    if key not in _STAT_SCHEMAS:
        raise KeyError(f"No stat schema configured for sport={sport!r}")
    return _STAT_SCHEMAS[key]
