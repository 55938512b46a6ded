"""Team ovr from the ovr ratings of its healthy players."""

from __future__ import annotations

import math
from typing import Sequence

from simprep.collaborators.protocols import RatedPlayer

# Only the top of the rotation moves the needle.
_NUM_PLAYERS = 10
_INTERCEPT = -124.13
_SLOPE = 0.4417
_DECAY = -0.1905


def predicted_mov(players: Sequence[RatedPlayer]) -> float:
    """Predicted margin of victory against an average team."""

    ratings = sorted((p.ovr for p in players), reverse=True)[:_NUM_PLAYERS]
    ratings += [0.0] * (_NUM_PLAYERS - len(ratings))
    return _INTERCEPT + sum(
        _SLOPE * math.exp(_DECAY * i) * ovr for i, ovr in enumerate(ratings)
    )


def basketball_team_ovr(players: Sequence[RatedPlayer]) -> float:
    """Rescale the predicted MOV so an average team lands near 50."""

    return predicted_mov(players) * 50 / 15 + 50
