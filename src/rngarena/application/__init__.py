"""Application services built on the bracket engine."""

from __future__ import annotations

from .spectator import (
    ByeRecord,
    ResolveFn,
    SpectatorRunResult,
    SpectatorSession,
    WatchedMatch,
    coin_flip_resolver,
)

__all__ = [
    "ByeRecord",
    "ResolveFn",
    "SpectatorRunResult",
    "SpectatorSession",
    "WatchedMatch",
    "coin_flip_resolver",
]
