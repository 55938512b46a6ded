"""Exceptions raised while compiling team states."""

from __future__ import annotations


class SimPrepError(RuntimeError):
    """Base class for team-state compilation failures."""


class NotFoundError(SimPrepError, LookupError):
    """Raised when a player, team or team season is missing from the store."""

    def __init__(self, kind: str, key: object):
        super().__init__(f"Can't find {kind} {key!r}")
        self.kind = kind
        self.key = key


class ConfigurationError(SimPrepError, ValueError):
    """Raised when composite weights or stat schemas are empty or malformed."""


class InvalidRequestError(SimPrepError, ValueError):
    """Raised when the requested team ids cannot produce one state per id."""


__all__ = [
    "ConfigurationError",
    "InvalidRequestError",
    "NotFoundError",
    "SimPrepError",
]
