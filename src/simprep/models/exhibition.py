"""Exhibition (all-star) roster as handed over by the roster generator."""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# Team ids reserved for the two exhibition sides, in side order.
EXHIBITION_TIDS: Tuple[int, int] = (-1, -2)


class ExhibitionSlot(BaseModel):
    pid: int

    model_config = ConfigDict(frozen=True)


class ExhibitionRoster(BaseModel):
    finalized: bool = False
    teams: Tuple[List[ExhibitionSlot], List[ExhibitionSlot]] = Field(
        default_factory=lambda: ([], [])
    )

    model_config = ConfigDict(frozen=True)
