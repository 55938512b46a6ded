"""Default composite weight tables for supported sports."""

from __future__ import annotations

from typing import Dict, Iterable

from simprep.ratings.composite import CompositeWeightTable

_BASKETBALL_WEIGHTS: Dict[str, Dict[str, list]] = {
    "pace": {"ratings": ["spd", "jmp", "dnk", "tp", "drb", "pss"]},
    "usage": {
        "ratings": ["ins", "dnk", "fg", "tp", "spd", "hgt", "drb", "oiq"],
        "weights": [1.5, 1, 1, 1, 0.5, 0.5, 0.5, 0.5],
    },
    "dribbling": {"ratings": ["drb", "spd"], "weights": [1, 1]},
    "passing": {"ratings": ["drb", "pss", "oiq"], "weights": [0.4, 1, 0.5]},
    "turnovers": {"ratings": [50, "ins", "pss", "oiq"], "weights": [0.5, 1, 1, -1]},
    "shooting_at_rim": {"ratings": ["hgt", "stre", "dnk", "oiq"], "weights": [2, 0.3, 0.3, 0.2]},
    "shooting_low_post": {
        "ratings": ["hgt", "stre", "spd", "ins", "oiq"],
        "weights": [1, 0.6, 0.2, 1, 0.4],
    },
    "shooting_mid_range": {"ratings": ["oiq", "fg", "stre"], "weights": [-0.5, 1, 0.2]},
    "shooting_three_pointer": {"ratings": ["oiq", "tp"], "weights": [0.1, 1]},
    "shooting_ft": {"ratings": ["ft"], "weights": [1]},
    "rebounding": {
        "ratings": ["hgt", "stre", "jmp", "reb", "oiq", "diq"],
        "weights": [2, 0.1, 0.1, 2, 0.5, 0.5],
    },
    "stealing": {"ratings": [50, "spd", "diq"], "weights": [1, 1, 2]},
    "blocking": {"ratings": ["hgt", "jmp", "diq"], "weights": [2.5, 1.5, 0.5]},
    "fouling": {"ratings": [50, "hgt", "diq", "spd"], "weights": [3, 1, -1, -1]},
    "drawing_fouls": {"ratings": ["hgt", "spd", "drb", "dnk", "oiq"], "weights": [1, 1, 1, 1, 1]},
    "defense": {"ratings": ["hgt", "stre", "spd", "jmp", "diq"], "weights": [1, 1, 1, 0.5, 2]},
    "defense_interior": {
        "ratings": ["hgt", "stre", "spd", "jmp", "diq"],
        "weights": [2.5, 1, 0.5, 0.5, 2],
    },
    "defense_perimeter": {
        "ratings": ["hgt", "stre", "spd", "jmp", "diq"],
        "weights": [0.5, 0.5, 2, 0.5, 1],
    },
    "endurance": {"ratings": [50, "endu"], "weights": [1, 1]},
    "athleticism": {"ratings": ["stre", "spd", "jmp", "hgt"], "weights": [1, 1, 1, 0.75]},
    "jump_ball": {"ratings": ["hgt", "jmp"], "weights": [1, 0.25]},
}

_WEIGHT_TABLES: Dict[str, CompositeWeightTable] = {
    "BASKETBALL": CompositeWeightTable(_BASKETBALL_WEIGHTS),
}


def iter_sports() -> Iterable[str]:
    """Return the sports with a built-in weight table."""

    return _WEIGHT_TABLES.keys()


def get_weights(sport: str) -> CompositeWeightTable:
    """Fetch the weight table for a sport, raising KeyError if missing."""

    key = sport.upper()
    if key not in _WEIGHT_TABLES:
        raise KeyError(f"No composite weights configured for sport={sport!r}")
    return _WEIGHT_TABLES[key]

