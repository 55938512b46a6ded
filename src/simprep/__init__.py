"""Pre-simulation compiler of team and player state."""

from .context import LeagueContext, Phase
from .errors import ConfigurationError, InvalidRequestError, NotFoundError, SimPrepError
from .loader import TeamStateLoader, load_team_states
from .requests import ExhibitionSide, RegularTeam, TeamRequest, resolve_requests

__all__ = [
    "ConfigurationError",
    "ExhibitionSide",
    "InvalidRequestError",
    "LeagueContext",
    "NotFoundError",
    "Phase",
    "RegularTeam",
    "SimPrepError",
    "TeamRequest",
    "TeamStateLoader",
    "load_team_states",
    "resolve_requests",
]
