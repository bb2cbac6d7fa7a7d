"""Command line interface for RNG Arena."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from rngarena.application import SpectatorRunResult, SpectatorSession, coin_flip_resolver
from rngarena.config_loader import (
    ConfigError,
    RosterCfg,
    TournamentCfg,
    collect_configs,
    load_tournament,
    participant_pool,
    validate_configs,
)
from rngarena.domain import ConfigurationError
from rngarena.tournament import BracketEngine, next_power_of_two, round_name, seeded_order
from rngarena.utils import display_name
from rngarena.utils.paths import resolve_timestamped_output_dir, write_json

app = typer.Typer(help="CLI for RNG Arena configuration and tournament runs.")
console = Console()


def _config_dir_option(default: str = "config") -> Path:
    return Path(default)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _handle_config_error(exc: ConfigurationError) -> None:
    console.print(str(exc))
    raise typer.Exit(code=1) from exc


def _load_tournament_or_exit(name: str, config_dir: Path) -> tuple[TournamentCfg, RosterCfg]:
    try:
        return load_tournament(name, config_dir)
    except ConfigError as exc:
        _handle_config_error(exc)
        raise  # pragma: no cover


@app.command()
def validate(
    config_dir: Path = typer.Option(
        default=_config_dir_option(),
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
        help="Directory containing RNG Arena configuration YAML files.",
    )
) -> None:
    """Validate configuration files."""

    try:
        rosters, tournaments = collect_configs(config_dir)
        validate_configs(rosters, tournaments)
    except ConfigError as exc:
        _handle_config_error(exc)
    console.print("[green]Configs OK[/green]")


@app.command()
def show(
    subject: str = typer.Argument(..., help="Entity to show. Currently only 'tournament'."),
    name: str = typer.Argument(..., help="Name of the tournament."),
    config_dir: Path = typer.Option(
        default=_config_dir_option(),
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
        help="Directory containing RNG Arena configuration YAML files.",
    ),
) -> None:
    """Display details about a configuration entity."""

    if subject != "tournament":
        console.print("[red]Only 'tournament' is supported for show.[/red]")
        raise typer.Exit(code=1)

    tournament, roster = _load_tournament_or_exit(name, config_dir)
    _print_tournament_details(tournament, roster)


def _print_tournament_details(tournament: TournamentCfg, roster: RosterCfg) -> None:
    settings = tournament.settings
    size = settings.bracket_size or next_power_of_two(settings.participants)
    rounds = size.bit_length()

    console.print(f"[bold]Tournament:[/bold] {tournament.name}")
    console.print(f"Description: {tournament.description}")
    console.print("")

    table = Table(title="Tournament Overview")
    table.add_column("Field", justify="left")
    table.add_column("Value", justify="left")
    table.add_row("Roster", roster.name)
    table.add_row("Hero", roster.hero)
    table.add_row("Participants", str(settings.participants))
    table.add_row("Bracket Size", str(size))
    table.add_row("Rounds", str(rounds))
    table.add_row("Shuffle", "yes" if settings.shuffle else "no")
    table.add_row(
        "Round Names",
        ", ".join(round_name(index, size >> index) for index in range(rounds)),
    )
    console.print(table)


@app.command("run")
def run_tournament(
    tournament: str = typer.Option(..., "--tournament", help="Tournament name or path."),
    config_dir: Path = typer.Option(
        default=_config_dir_option(),
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
        help="Directory containing RNG Arena configuration YAML files.",
    ),
    seed: int = typer.Option(42, "--seed", help="Seed for seeding, simulated matches and watched fights."),
    export: Path | None = typer.Option(
        None,
        "--export",
        file_okay=False,
        dir_okay=True,
        writable=True,
        help="Write the final bracket as JSON under a timestamped folder here.",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the opening matches without playing."),
    verbose: bool = typer.Option(False, "--verbose", help="Log engine events."),
) -> None:
    """Play a whole tournament, watching the followed participant."""

    _configure_logging(verbose)
    tournament_cfg, roster = _load_tournament_or_exit(tournament, config_dir)

    pool = participant_pool(tournament_cfg, roster)
    if tournament_cfg.settings.shuffle:
        pool = seeded_order(pool, roster.hero, random.Random(f"{seed}:roster"))

    try:
        engine = BracketEngine(
            pool,
            hero=roster.hero,
            bracket_size=tournament_cfg.settings.bracket_size,
            rng=random.Random(f"{seed}:bracket"),
        )
    except ConfigurationError as exc:
        _handle_config_error(exc)
        return

    if dry_run:
        _print_opening(engine)
        return

    session = SpectatorSession(engine, coin_flip_resolver(random.Random(f"{seed}:combat")))
    result = session.run()
    _print_run(result, engine)

    if export is not None:
        final_dir = resolve_timestamped_output_dir(export)
        path = write_json(final_dir / "bracket.json", engine.snapshot())
        console.print(f"Bracket JSON: {path}")


def _print_opening(engine: BracketEngine) -> None:
    info = engine.round_info()
    opening = engine.rounds()[0]
    matches = [
        (opening[position], opening[position + 1])
        for position in range(0, len(opening) - 1, 2)
        if opening[position] is not None and opening[position + 1] is not None
    ]
    byes = engine.bracket_size - sum(1 for slot in opening if slot is not None)

    console.print(
        f"Bracket of {engine.bracket_size}: {info.participants_remaining} participants, "
        f"{info.total} rounds, {len(matches)} opening matches, {byes} byes"
    )
    for first, second in matches[:3]:
        console.print(f"  {display_name(first)} vs {display_name(second)}")
    if len(matches) > 3:
        console.print(f"  ... ({len(matches) - 3} more matches)")
    console.print(f"Following: {engine.following}")


def _print_run(result: SpectatorRunResult, engine: BracketEngine) -> None:
    events: list[tuple[int, str]] = []
    for watched in result.watched:
        seating, outcome = watched.seating, watched.result
        line = (
            f"[bold]{watched.round.name}[/bold] {display_name(seating.left)} vs "
            f"{display_name(seating.right)} → [green]{display_name(outcome.winner)}[/green]"
        )
        if outcome.hero_eliminated:
            line += " [red](hero eliminated)[/red]"
        if outcome.following_changed:
            line += f" [yellow]now following {display_name(outcome.winner)}[/yellow]"
        events.append((watched.round.current, line))
    for record in result.byes:
        events.append(
            (
                record.round.current,
                f"[bold]{record.round.name}[/bold] [cyan]Lucky bye![/cyan] "
                f"{display_name(record.bye.character)} advances",
            )
        )

    for _, line in sorted(events, key=lambda item: item[0]):
        console.print(line)

    stats = result.stats
    table = Table(title="Tournament Result")
    table.add_column("Field", justify="left")
    table.add_column("Value", justify="left")
    table.add_row("Champion", result.champion or "n/a")
    table.add_row("Hero", f"{engine.hero} ({'alive' if result.hero_alive else 'eliminated'})")
    table.add_row("Matches Watched", str(len(result.watched)))
    if stats is not None:
        table.add_row("Matches Decided", f"{stats.matches_completed}/{stats.total_matches}")
        table.add_row("Rounds", str(stats.total_rounds))
    console.print(table)
    console.print(f"\n[green]Tournament complete:[/green] {result.champion} wins the crown")


def main(argv: Iterable[str] | None = None) -> None:
    """Invoke the Typer application."""
    app(args=list(argv) if argv is not None else None)


if __name__ == "__main__":
    main()
