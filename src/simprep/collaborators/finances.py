"""Expense rankings derived from recent team seasons."""

from __future__ import annotations

from typing import Sequence

from simprep.models.team import TeamSeason

# Most recent season first.
_LAST_THREE_WEIGHTS = (3, 2, 1)


def rank_last_three(
    seasons: Sequence[TeamSeason],
    item: str,
    *,
    default: float,
) -> float:
    """Weighted average rank of ``item`` expenses over the last three seasons.

    ``seasons`` is ordered oldest first. Seasons that do not record the expense
    item are skipped; ``default`` is returned when nothing is left.
    """

    recent = [s.expenses[item].rank for s in reversed(seasons[-3:]) if item in s.expenses]
    if not recent:
        return default
    weights = _LAST_THREE_WEIGHTS[: len(recent)]
    return sum(w * r for w, r in zip(weights, recent)) / sum(weights)


class HealthRanker:
    """Health expense rank, defaulting to the middle of the league."""

    def __init__(self, num_teams: int):
        self.default = (num_teams + 1) / 2

    def __call__(self, seasons: Sequence[TeamSeason]) -> float:
        return rank_last_three(seasons, "health", default=self.default)
