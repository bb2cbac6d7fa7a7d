"""Tests for run report directory helpers."""

from __future__ import annotations

import json
import re

from rngarena.utils import paths


def test_resolve_timestamped_output_dir_creates_directory(monkeypatch, tmp_path):
    base = tmp_path / "reports"
    monkeypatch.setattr(paths, "current_timestamp_str", lambda: "20250101120000")
    resolved = paths.resolve_timestamped_output_dir(base)
    assert resolved.exists()
    assert resolved.name == "20250101120000"


def test_resolve_timestamped_output_dir_unique(monkeypatch, tmp_path):
    base = tmp_path / "reports"
    monkeypatch.setattr(paths, "current_timestamp_str", lambda: "20250101120000")
    first = paths.resolve_timestamped_output_dir(base)
    monkeypatch.setattr(paths, "current_timestamp_str", lambda: "20250101120001")
    second = paths.resolve_timestamped_output_dir(base)
    assert first != second
    assert second.exists()


def test_current_timestamp_str_format(monkeypatch):
    class FixedDatetime(paths.datetime):  # type: ignore[attr-defined]
        @classmethod
        def now(cls, tz=None):
            return cls(2025, 1, 2, 3, 4, 5, tzinfo=paths.timezone.utc)

    monkeypatch.setattr(paths, "datetime", FixedDatetime)
    assert re.fullmatch(r"\d{14}", paths.current_timestamp_str())


def test_write_json_creates_parents(tmp_path):
    target = tmp_path / "nested" / "bracket.json"
    paths.write_json(target, {"champion": "Daring Hero"})
    assert json.loads(target.read_text(encoding="utf-8")) == {"champion": "Daring Hero"}
