"""Persisted team and team-season models."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ExpenseLevel(BaseModel):
    amount: float = 0.0
    rank: float = 1.0

    model_config = ConfigDict(frozen=True)


class Team(BaseModel):
    tid: int
    cid: int
    did: int
    depth: Optional[Dict[str, List[int]]] = None

    model_config = ConfigDict(frozen=True)


class TeamSeason(BaseModel):
    tid: int
    season: int
    won: int = Field(default=0, ge=0)
    lost: int = Field(default=0, ge=0)
    tied: int = Field(default=0, ge=0)
    expenses: Dict[str, ExpenseLevel] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
