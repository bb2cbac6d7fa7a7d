"""Domain records shared by the engine, the driver and the CLI."""

from __future__ import annotations

from .bracket import (
    BracketStats,
    ByeInfo,
    Match,
    MatchResult,
    RoundInfo,
    Seating,
    Side,
    Slot,
)
from .config import RosterCfg, TournamentCfg, TournamentSettings
from .errors import ArenaError, ConfigError, ConfigurationError, InvalidStateError

__all__ = [
    "ArenaError",
    "BracketStats",
    "ByeInfo",
    "ConfigError",
    "ConfigurationError",
    "InvalidStateError",
    "Match",
    "MatchResult",
    "RosterCfg",
    "RoundInfo",
    "Seating",
    "Side",
    "Slot",
    "TournamentCfg",
    "TournamentSettings",
]
