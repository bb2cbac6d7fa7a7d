"""Helpers for run report directories."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Mapping

TimestampStr = str


def current_timestamp_str() -> TimestampStr:
    """Return the current timestamp as ``YYYYMMDDHHMMSS`` in the local timezone."""

    return datetime.now(timezone.utc).astimezone().strftime("%Y%m%d%H%M%S")


def resolve_timestamped_output_dir(base: Path) -> Path:
    """Create and return a fresh ``base/<timestamp>`` directory."""

    concrete = base / current_timestamp_str()
    concrete.mkdir(parents=True, exist_ok=False)
    return concrete


def write_json(path: Path, payload: Mapping[str, object]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)
    return path


__all__ = ["current_timestamp_str", "resolve_timestamped_output_dir", "write_json"]
