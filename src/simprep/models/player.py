"""Persisted player models read from the league store."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

HEALTHY = "Healthy"


class Born(BaseModel):
    year: int

    model_config = ConfigDict(frozen=True)


class Injury(BaseModel):
    type: str = HEALTHY
    games_remaining: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


class PlayerRatings(BaseModel):
    """One rating snapshot; players carry a time-ordered list of these."""

    raw: Dict[str, float]
    pos: str
    ovr: float
    ovrs: Dict[str, float] = Field(default_factory=dict)
    skills: List[str] = Field(default_factory=list)
    season: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class Player(BaseModel):
    pid: int
    tid: int
    first_name: str
    last_name: str
    born: Born
    ratings: List[PlayerRatings] = Field(..., min_length=1)
    injury: Injury = Field(default_factory=Injury)
    roster_order: int = 0
    pt_modifier: float = 1.0
    value_no_pot: float = 0.0

    model_config = ConfigDict(frozen=True)

    @property
    def latest_ratings(self) -> PlayerRatings:
        return self.ratings[-1]

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_fit(self) -> bool:
        return self.injury.games_remaining == 0
