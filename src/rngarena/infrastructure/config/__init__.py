"""YAML configuration for rosters and tournaments."""

from __future__ import annotations

from .loader import collect_configs, load_tournament, participant_pool
from .validators import validate_configs

__all__ = ["collect_configs", "load_tournament", "participant_pool", "validate_configs"]
