"""Tagged team requests resolved from raw team ids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union

from simprep.errors import InvalidRequestError
from simprep.models.exhibition import EXHIBITION_TIDS


@dataclass(frozen=True)
class RegularTeam:
    tid: int

    @property
    def exhibition(self) -> bool:
        return False


@dataclass(frozen=True)
class ExhibitionSide:
    side: int

    @property
    def tid(self) -> int:
        return EXHIBITION_TIDS[self.side]

    @property
    def exhibition(self) -> bool:
        return True


TeamRequest = Union[RegularTeam, ExhibitionSide]


def resolve_requests(tids: Sequence[int]) -> List[TeamRequest]:
    """Tag each requested id.

    Exactly the two reserved ids (in either order) form an exhibition game;
    any other combination is a list of regular teams.
    """

    if not tids:
        raise InvalidRequestError("at least one team id is required")
    if len(set(tids)) != len(tids):
        raise InvalidRequestError(f"duplicate team ids in request: {list(tids)}")

    if len(tids) == 2 and set(tids) == set(EXHIBITION_TIDS):
        return [ExhibitionSide(EXHIBITION_TIDS.index(tid)) for tid in tids]
    return [RegularTeam(tid) for tid in tids]
