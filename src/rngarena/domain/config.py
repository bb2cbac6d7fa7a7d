"""Domain models representing configuration artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError


@dataclass(frozen=True, kw_only=True)
class RosterCfg:
    path: Path = field(repr=False, compare=False)
    name: str
    description: str
    hero: str
    participants: list[str]
    notes: str | None = None


@dataclass(frozen=True, kw_only=True)
class TournamentSettings:
    participants: int
    bracket_size: int | None = None
    shuffle: bool = True


@dataclass(frozen=True, kw_only=True)
class TournamentCfg:
    path: Path = field(repr=False, compare=False)
    name: str
    description: str
    roster: str
    settings: TournamentSettings
    notes: str | None = None


__all__ = [
    "ConfigError",
    "RosterCfg",
    "TournamentSettings",
    "TournamentCfg",
]
