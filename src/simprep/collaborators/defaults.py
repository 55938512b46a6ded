"""Bundle of aggregation services used while building a team."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from simprep.collaborators.depth import depth_players
from simprep.collaborators.finances import HealthRanker
from simprep.collaborators.protocols import DepthChart, HealthRank, TeamOvr
from simprep.collaborators.team_ovr import basketball_team_ovr
from simprep.models.team import TeamSeason


@dataclass(frozen=True)
class Collaborators:
    team_ovr: TeamOvr = basketball_team_ovr
    health_rank: Optional[HealthRank] = None
    depth_chart: DepthChart = depth_players

    def rank_health(self, seasons: Sequence[TeamSeason], *, num_teams: int) -> float:
        ranker = self.health_rank or HealthRanker(num_teams)
        return ranker(seasons)
