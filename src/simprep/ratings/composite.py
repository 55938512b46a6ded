"""Composite ratings derived from a player's raw rating snapshot."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, Mapping, MutableMapping, Sequence, Tuple, Union

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from simprep.errors import ConfigurationError
from simprep.models.player import PlayerRatings

Component = Union[str, float]

PACE = "pace"
USAGE = "usage"


class CompositeWeight(BaseModel):
    """Raw ratings (or numeric constants) feeding one composite, with weights."""

    ratings: Tuple[Component, ...] = Field(..., min_length=1)
    weights: Tuple[float, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _default_weights(cls, data: object) -> object:
        if isinstance(data, Mapping) and not data.get("weights"):
            ratings = data.get("ratings") or ()
            return {**data, "weights": [1.0] * len(ratings)}
        return data

    @model_validator(mode="after")
    def _check_weights(self) -> "CompositeWeight":
        if len(self.weights) != len(self.ratings):
            raise ValueError(
                f"{len(self.ratings)} ratings but {len(self.weights)} weights"
            )
        if not any(self.weights):
            raise ValueError("weights must not all be zero")
        return self


def composite_rating(
    ratings: PlayerRatings,
    components: Sequence[Component],
    weights: Sequence[float],
    round_result: bool = False,
) -> float:
    """Weighted mean of the selected ratings on a 0-1 scale.

    Numeric components are used as-is instead of being looked up, which lets a
    composite lean towards a fixed midpoint. The result is bounded to [0, 1].
    """

    total = 0.0
    divide_by = 0.0
    for component, weight in zip(components, weights):
        if isinstance(component, str):
            try:
                value = ratings.raw[component]
            except KeyError:
                raise ConfigurationError(
                    f"rating snapshot has no raw rating {component!r}"
                ) from None
        else:
            value = component
        total += weight * value / 100
        divide_by += abs(weight)

    score = max(0.0, min(1.0, total / divide_by))
    if round_result:
        return round(score, 2)
    return score


class CompositeRatings(MutableMapping[str, float]):
    """Fixed-key mapping of composite name to score.

    Keys are the names of the table that produced it; values can be updated but
    keys can be neither added nor removed.
    """

    __slots__ = ("_keys", "_values")

    def __init__(self, keys: type[Enum], values: Mapping[str, float]):
        names = {member.value for member in keys}
        if set(values) != names:
            raise KeyError(
                f"composite ratings must cover exactly {sorted(names)}, got {sorted(values)}"
            )
        self._keys = keys
        self._values: Dict[str, float] = {member.value: float(values[member.value]) for member in keys}

    def _name(self, key: Union[str, Enum]) -> str:
        if isinstance(key, Enum):
            key = key.value
        if key not in self._values:
            raise KeyError(key)
        return key

    def __getitem__(self, key: Union[str, Enum]) -> float:
        return self._values[self._name(key)]

    def __setitem__(self, key: Union[str, Enum], value: float) -> None:
        self._values[self._name(key)] = float(value)

    def __delitem__(self, key: Union[str, Enum]) -> None:
        raise TypeError("composite rating keys are fixed")

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"CompositeRatings({self._values!r})"

    @property
    def keys_enum(self) -> type[Enum]:
        return self._keys

    def to_dict(self) -> Dict[str, float]:
        return dict(self._values)


class CompositeWeightTable(Mapping[str, CompositeWeight]):
    """Validated, immutable set of composite definitions for a league.

    The closed ``keys`` enum is built once here, so every ``CompositeRatings``
    produced by the table shares the same key set.
    """

    def __init__(self, weights: Mapping[str, Union[CompositeWeight, Mapping[str, object]]]):
        if not weights:
            raise ConfigurationError("composite weight table is empty")
        parsed: Dict[str, CompositeWeight] = {}
        for name, spec in weights.items():
            if not isinstance(name, str) or not name.isidentifier():
                raise ConfigurationError(f"invalid composite name {name!r}")
            try:
                parsed[name] = (
                    spec if isinstance(spec, CompositeWeight) else CompositeWeight.model_validate(spec)
                )
            except ValueError as exc:
                raise ConfigurationError(f"composite {name!r}: {exc}") from exc
        if PACE not in parsed:
            raise ConfigurationError(f"composite weight table needs a {PACE!r} composite")
        try:
            keys = Enum("CompositeRating", [(name, name) for name in parsed])
        except ValueError as exc:
            raise ConfigurationError(f"invalid composite names: {exc}") from exc
        self._weights = parsed
        self.keys_enum: type[Enum] = keys

    def __getitem__(self, name: str) -> CompositeWeight:
        return self._weights[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._weights)

    def rate(self, ratings: PlayerRatings) -> Dict[str, float]:
        """Evaluate every composite once for one rating snapshot."""

        return {
            name: composite_rating(ratings, spec.ratings, spec.weights, False)
            for name, spec in self._weights.items()
        }

    def ratings_from(self, values: Mapping[str, float]) -> CompositeRatings:
        return CompositeRatings(self.keys_enum, values)

    def zeroed(self) -> CompositeRatings:
        return CompositeRatings(self.keys_enum, {name: 0.0 for name in self._weights})

    def to_payload(self) -> Dict[str, Dict[str, list]]:
        return {
            name: {"ratings": list(spec.ratings), "weights": list(spec.weights)}
            for name, spec in self._weights.items()
        }
