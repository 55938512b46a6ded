"""Simulation-ready team and player records produced by the loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from simprep.models.player import Injury

if TYPE_CHECKING:
    from simprep.ratings.composite import CompositeRatings


@dataclass
class Synergy:
    """Lineup synergy, filled in by the simulation engine during a game."""

    off: float = 0.0
    def_: float = 0.0
    reb: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"off": self.off, "def": self.def_, "reb": self.reb}


@dataclass(frozen=True)
class ProcessedPlayerState:
    id: int
    name: str
    age: int
    pos: str
    value_no_pot: float
    stat: Dict[str, float]
    composite_rating: CompositeRatings
    skills: Tuple[str, ...]
    injury: Injury
    injured: bool
    pt_modifier: float
    ovrs: Dict[str, float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "pos": self.pos,
            "value_no_pot": self.value_no_pot,
            "stat": dict(self.stat),
            "composite_rating": self.composite_rating.to_dict(),
            "skills": list(self.skills),
            "injury": self.injury.model_dump(),
            "injured": self.injured,
            "pt_modifier": self.pt_modifier,
            "ovrs": dict(self.ovrs),
        }


@dataclass(frozen=True)
class ProcessedTeamState:
    id: int
    cid: int
    did: int
    won: int
    lost: int
    tied: Optional[int]
    ovr: float
    pace: float
    stat: Dict[str, Any]
    player: List[ProcessedPlayerState]
    health_rank: float
    composite_rating: CompositeRatings
    synergy: Synergy = field(default_factory=Synergy)
    depth: Optional[Dict[str, List[ProcessedPlayerState]]] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "cid": self.cid,
            "did": self.did,
            "won": self.won,
            "lost": self.lost,
            "ovr": self.ovr,
            "pace": self.pace,
            "stat": {key: list(value) if isinstance(value, list) else value for key, value in self.stat.items()},
            "player": [p.to_dict() for p in self.player],
            "synergy": self.synergy.to_dict(),
            "health_rank": self.health_rank,
            "composite_rating": self.composite_rating.to_dict(),
            "depth": None,
        }
        if self.tied is not None:
            payload["tied"] = self.tied
        if self.depth is not None:
            payload["depth"] = {pos: [p.id for p in players] for pos, players in self.depth.items()}
        return payload
