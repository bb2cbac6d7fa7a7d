"""RNG Arena: a single-elimination bracket that follows one participant."""

from __future__ import annotations

from rngarena.application import SpectatorSession, coin_flip_resolver
from rngarena.domain import (
    ArenaError,
    ByeInfo,
    ConfigurationError,
    InvalidStateError,
    Match,
    MatchResult,
    RoundInfo,
    Seating,
    Side,
)
from rngarena.tournament import BracketEngine, build_bracket, seeded_order

__version__ = "0.1.0"

__all__ = [
    "ArenaError",
    "BracketEngine",
    "ByeInfo",
    "ConfigurationError",
    "InvalidStateError",
    "Match",
    "MatchResult",
    "RoundInfo",
    "Seating",
    "Side",
    "SpectatorSession",
    "build_bracket",
    "coin_flip_resolver",
    "seeded_order",
]
