"""Configuration helpers for composite weights and stat schemas."""

from .composite import get_weights, iter_sports
from .league import LeagueConfig, default_config
from .stats import StatSchema, get_stat_schema

__all__ = [
    "LeagueConfig",
    "StatSchema",
    "default_config",
    "get_stat_schema",
    "get_weights",
    "iter_sports",
]
