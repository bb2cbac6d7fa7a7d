"""Config loading utilities coordinating schema validation and parsing."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Tuple

import yaml

from rngarena.domain import ConfigError, RosterCfg, TournamentCfg, TournamentSettings

from .validators import build_validator, format_error, validate_configs, validate_with_schema

__all__ = ["collect_configs", "load_tournament", "participant_pool", "validate_configs"]


def _read_yaml(path: Path) -> Mapping[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:  # pragma: no cover - filesystem error propagation
        raise ConfigError(format_error(path, "<file>", str(exc))) from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(format_error(path, "<root>", f"Invalid YAML: {exc}")) from exc
    if not isinstance(data, Mapping):
        raise ConfigError(format_error(path, "<root>", "Top-level document must be a mapping."))
    return data


def _ensure_unique(name: str, seen: Dict[str, Path], path: Path, kind: str) -> None:
    existing = seen.get(name)
    if existing is not None:
        raise ConfigError(
            format_error(
                path,
                "name",
                f"Duplicate {kind} identifier '{name}' already defined in {existing}",
            )
        )
    seen[name] = path


def _build_roster(data: Mapping[str, Any], path: Path) -> RosterCfg:
    return RosterCfg(
        path=path,
        name=str(data["name"]),
        description=str(data["description"]),
        hero=str(data["hero"]),
        participants=[str(name) for name in data["participants"]],
        notes=data.get("notes"),
    )


def _build_settings(data: Mapping[str, Any]) -> TournamentSettings:
    bracket_size = data.get("bracket_size")
    return TournamentSettings(
        participants=int(data["participants"]),
        bracket_size=int(bracket_size) if bracket_size is not None else None,
        shuffle=bool(data.get("shuffle", True)),
    )


def _build_tournament(data: Mapping[str, Any], path: Path) -> TournamentCfg:
    return TournamentCfg(
        path=path,
        name=str(data["name"]),
        description=str(data["description"]),
        roster=str(data["roster"]),
        settings=_build_settings(data["settings"]),
        notes=data.get("notes"),
    )


def _gather(directory: Path) -> Iterable[Path]:
    if not directory.exists():
        raise ConfigError(format_error(directory, "<dir>", "Required configuration directory is missing."))
    return sorted(directory.glob("*.yaml"))


def collect_configs(base_dir: Path) -> Tuple[dict[str, RosterCfg], dict[str, TournamentCfg]]:
    base_dir = base_dir.resolve()
    validator = build_validator()

    rosters: dict[str, RosterCfg] = {}
    tournaments: dict[str, TournamentCfg] = {}
    seen_rosters: dict[str, Path] = {}
    seen_tournaments: dict[str, Path] = {}

    for path in _gather(base_dir / "rosters"):
        data = _read_yaml(path)
        validate_with_schema(validator, data, "#/$defs/roster", path)
        cfg = _build_roster(data, path)
        _ensure_unique(cfg.name, seen_rosters, path, "roster")
        rosters[cfg.name] = cfg

    for path in _gather(base_dir / "tournaments"):
        data = _read_yaml(path)
        validate_with_schema(validator, data, "#/$defs/tournament", path)
        cfg = _build_tournament(data, path)
        _ensure_unique(cfg.name, seen_tournaments, path, "tournament")
        tournaments[cfg.name] = cfg

    return rosters, tournaments


def load_tournament(
    identifier: str | Path, base_dir: Path | None = None
) -> Tuple[TournamentCfg, RosterCfg]:
    """Load a tournament configuration, and its roster, by name or path."""

    base_dir = base_dir or Path.cwd()
    rosters, tournaments = collect_configs(base_dir)
    validate_configs(rosters, tournaments)

    if isinstance(identifier, str) and identifier in tournaments:
        cfg = tournaments[identifier]
        return cfg, rosters[cfg.roster]

    candidate = Path(identifier) if not isinstance(identifier, Path) else identifier
    candidate = candidate if candidate.is_absolute() else base_dir / "tournaments" / candidate
    candidate = candidate.resolve()

    for cfg in tournaments.values():
        if cfg.path.resolve() == candidate:
            return cfg, rosters[cfg.roster]

    raise ConfigError(format_error(candidate, "name", "Tournament not found."))


def participant_pool(tournament: TournamentCfg, roster: RosterCfg) -> List[str]:
    """Hero first, then the roster in file order, cut to the configured size."""

    others = [name for name in roster.participants if name != roster.hero]
    return [roster.hero, *others][: tournament.settings.participants]
