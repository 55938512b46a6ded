"""Depth chart lookup from stored player id orderings."""

from __future__ import annotations

import logging
from typing import Sequence

from simprep.collaborators.protocols import DepthAssignment, DepthConfig
from simprep.models.state import ProcessedPlayerState

logger = logging.getLogger(__name__)


def depth_players(
    depth: DepthConfig, players: Sequence[ProcessedPlayerState]
) -> DepthAssignment:
    """Resolve each depth position's id list to built player records.

    Ids that are no longer on the roster are dropped.
    """

    by_id = {p.id: p for p in players}
    assignment: DepthAssignment = {}
    for pos, pids in depth.items():
        resolved = [by_id[pid] for pid in pids if pid in by_id]
        if len(resolved) != len(pids):
            logger.debug("Depth position %s references %d missing players", pos, len(pids) - len(resolved))
        assignment[pos] = resolved
    return assignment
