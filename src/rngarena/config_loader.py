"""Configuration entry points."""

from __future__ import annotations

from rngarena.domain.config import (
    ConfigError,
    RosterCfg,
    TournamentCfg,
    TournamentSettings,
)
from rngarena.infrastructure.config.loader import (
    collect_configs,
    load_tournament,
    participant_pool,
)
from rngarena.infrastructure.config.validators import validate_configs

__all__ = [
    "ConfigError",
    "RosterCfg",
    "TournamentSettings",
    "TournamentCfg",
    "collect_configs",
    "load_tournament",
    "participant_pool",
    "validate_configs",
]
