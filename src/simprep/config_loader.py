"""Persist and load composite weight profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

from simprep.config.league import LeagueConfig
from simprep.config.stats import StatSchema, get_stat_schema
from simprep.errors import ConfigurationError
from simprep.ratings.composite import CompositeWeightTable


@dataclass
class CompositeProfile:
    composite_weights: Dict[str, dict]
    player_stats: Tuple[str, ...] = field(default_factory=tuple)
    team_stats: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def load(cls, path: Path) -> "CompositeProfile":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"{path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"{path} must contain a JSON object")
        return cls(
            composite_weights=data.get("composite_weights", {}),
            player_stats=tuple(data.get("player_stats", ())),
            team_stats=tuple(data.get("team_stats", ())),
        )

    @classmethod
    def from_config(cls, config: LeagueConfig) -> "CompositeProfile":
        return cls(
            composite_weights=config.weights.to_payload(),
            player_stats=config.stats.player,
            team_stats=config.stats.team,
        )

    def save(self, path: Path) -> None:
        payload = {
            "composite_weights": self.composite_weights,
            "player_stats": list(self.player_stats),
            "team_stats": list(self.team_stats),
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def to_config(self, *, sport: Optional[str] = None) -> LeagueConfig:
        """Build a league config; missing stat lists fall back to ``sport``'s."""

        weights = CompositeWeightTable(self.composite_weights)
        if self.player_stats and self.team_stats:
            stats = StatSchema(player=self.player_stats, team=self.team_stats)
        elif sport is not None:
            default = get_stat_schema(sport)
            stats = StatSchema(
                player=self.player_stats or default.player,
                team=self.team_stats or default.team,
            )
        else:
            raise ConfigurationError("profile has no stat schema and no sport to fall back on")
        return LeagueConfig(weights=weights, stats=stats)
