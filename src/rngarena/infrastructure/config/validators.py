"""Validation helpers for roster and tournament configuration."""

from __future__ import annotations

from dataclasses import asdict
from functools import lru_cache
from pathlib import Path
from typing import Mapping

import yaml
from jsonschema import Draft202012Validator, ValidationError

from rngarena.domain import ConfigError, RosterCfg, TournamentCfg
from rngarena.tournament.seeding import is_power_of_two, next_power_of_two

SCHEMA_FILE = Path(__file__).resolve().parent / "schemas" / "config-schema.json"


@lru_cache(maxsize=1)
def load_schema() -> Mapping[str, object]:
    return yaml.safe_load(SCHEMA_FILE.read_text(encoding="utf-8"))


def build_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema())


def format_error(path: Path, field: str, message: str) -> str:
    location = f"[cyan]{path}[/cyan]"
    target = f" → [magenta]{field}[/magenta]" if field else ""
    return f"[bold red]Config error[/bold red]: {location}{target} {message}"


def validate_with_schema(
    validator: Draft202012Validator,
    instance: Mapping[str, object],
    ref: str,
    path: Path,
) -> None:
    try:
        validator.evolve(schema={"$ref": ref, "$defs": load_schema()["$defs"]}).validate(instance)
    except ValidationError as exc:
        field = "/".join(str(part) for part in exc.path)
        raise ConfigError(format_error(path, field or "<root>", exc.message)) from exc


def dataclass_payload(instance: object) -> Mapping[str, object]:
    data = asdict(instance)
    data.pop("path", None)
    return {key: value for key, value in data.items() if value is not None}


def _validate_roster(cfg: RosterCfg) -> None:
    seen: set[str] = set()
    for name in cfg.participants:
        if name in seen:
            raise ConfigError(
                format_error(cfg.path, f"participants[{name}]", "Participant is listed twice.")
            )
        seen.add(name)
    if cfg.hero not in seen:
        raise ConfigError(
            format_error(cfg.path, "hero", f"Hero '{cfg.hero}' is not one of the participants.")
        )


def _validate_tournament(cfg: TournamentCfg, rosters: Mapping[str, RosterCfg]) -> None:
    roster = rosters.get(cfg.roster)
    if roster is None:
        raise ConfigError(
            format_error(cfg.path, f"roster[{cfg.roster}]", "Referenced roster is not defined.")
        )

    settings = cfg.settings
    if settings.participants > len(roster.participants):
        raise ConfigError(
            format_error(
                cfg.path,
                "settings.participants",
                f"Roster '{roster.name}' only has {len(roster.participants)} participants.",
            )
        )

    if settings.bracket_size is None:
        return
    if not is_power_of_two(settings.bracket_size):
        raise ConfigError(
            format_error(cfg.path, "settings.bracket_size", "Bracket size must be a power of two.")
        )
    if settings.bracket_size < next_power_of_two(settings.participants):
        raise ConfigError(
            format_error(
                cfg.path,
                "settings.bracket_size",
                f"A bracket of {settings.bracket_size} cannot hold {settings.participants} participants.",
            )
        )


def validate_configs(
    rosters: Mapping[str, RosterCfg],
    tournaments: Mapping[str, TournamentCfg],
) -> None:
    validator = build_validator()

    for cfg in rosters.values():
        validate_with_schema(validator, dataclass_payload(cfg), "#/$defs/roster", cfg.path)
        _validate_roster(cfg)

    for cfg in tournaments.values():
        payload = dict(dataclass_payload(cfg))
        payload["settings"] = {
            key: value for key, value in asdict(cfg.settings).items() if value is not None
        }
        validate_with_schema(validator, payload, "#/$defs/tournament", cfg.path)
        _validate_tournament(cfg, rosters)


__all__ = [
    "SCHEMA_FILE",
    "build_validator",
    "dataclass_payload",
    "format_error",
    "load_schema",
    "validate_configs",
    "validate_with_schema",
]
