"""Post-season intensity multiplier applied to composite ratings."""

from __future__ import annotations

from typing import MutableMapping

# Negative traits shrink when intensity rises.
INVERTED_RATINGS = frozenset({"turnovers", "fouling"})
# Receive half of the multiplier's deviation from 1.
HALF_EFFECT_RATINGS = frozenset({"endurance", "usage"})
DRAWING_FOULS = "drawing_fouls"
DRAWING_FOULS_FACTOR = 0.85


def playoff_intensity(ovr: float) -> float:
    """Multiplier for playoff composites, keyed on the player's latest ovr.

    Piecewise: flat 1.01 below 45, two cubic segments up to 75 and a flat 1.2
    above it. The boundary operators are intentional.
    """

    y = 0.0
    if ovr < 45:
        y = 0.01
    elif ovr >= 45 and ovr < 60:
        y = 0.0001066667 * ovr**3 - 0.0158 * ovr**2 + 0.7803333333 * ovr - 12.83
    elif ovr >= 60 and ovr <= 75:
        y = 0.0000266667 * ovr**3 - 0.0056 * ovr**2 + 0.3933333333 * ovr - 9.05
    elif ovr > 75:
        y = 0.2
    return y + 1


def apply_playoff_adjustment(values: MutableMapping[str, float], ovr: float) -> None:
    """Scale every composite in ``values`` in place for the playoffs."""

    multiplier = playoff_intensity(ovr)
    for name in list(values):
        if name in INVERTED_RATINGS:
            values[name] /= multiplier
        elif name == DRAWING_FOULS:
            values[name] *= DRAWING_FOULS_FACTOR
        elif name in HALF_EFFECT_RATINGS:
            values[name] *= 1 + (multiplier - 1) / 2
        else:
            values[name] *= multiplier
