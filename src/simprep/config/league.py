"""League-wide static configuration shared by every load."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from simprep.config.composite import get_weights
from simprep.config.stats import StatSchema, get_stat_schema
from simprep.ratings.composite import CompositeWeightTable


@dataclass(frozen=True)
class LeagueConfig:
    weights: CompositeWeightTable
    stats: StatSchema

    def zeroed_player_stats(self) -> Dict[str, float]:
        return self.stats.zeroed_player_stats()

    def zeroed_team_stats(self) -> Dict[str, float]:
        return self.stats.zeroed_team_stats()


def default_config(sport: str = "basketball") -> LeagueConfig:
    """Built-in weights and stat schema for ``sport``."""

    return LeagueConfig(weights=get_weights(sport), stats=get_stat_schema(sport))
