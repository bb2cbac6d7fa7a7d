"""CLI command tests for rngarena."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from typer.testing import CliRunner

from rngarena.cli import app

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"


def _copy_config_tree(tmp_path: Path) -> Path:
    destination = tmp_path / "config"
    shutil.copytree(CONFIG_DIR, destination)
    return destination


def test_cli_validate_happy_path(tmp_path: Path) -> None:
    config_dir = _copy_config_tree(tmp_path)
    runner = CliRunner()
    result = runner.invoke(app, ["validate", "--config-dir", str(config_dir)], catch_exceptions=False)
    assert result.exit_code == 0
    assert "Configs OK" in result.stdout


def test_cli_validate_reports_config_error(tmp_path: Path) -> None:
    config_dir = _copy_config_tree(tmp_path)
    (config_dir / "tournaments" / "broken.yaml").write_text("- not a mapping\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["validate", "--config-dir", str(config_dir)])
    assert result.exit_code == 1
    assert "Config error" in result.stdout


def test_cli_show_tournament(tmp_path: Path) -> None:
    config_dir = _copy_config_tree(tmp_path)
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["show", "tournament", "RNG Arena", "--config-dir", str(config_dir)],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert "RNG Arena" in result.stdout
    assert "128" in result.stdout
    assert "Daring Hero" in result.stdout


def test_cli_show_rejects_other_subjects(tmp_path: Path) -> None:
    config_dir = _copy_config_tree(tmp_path)
    runner = CliRunner()
    result = runner.invoke(app, ["show", "roster", "Knights", "--config-dir", str(config_dir)])
    assert result.exit_code == 1


def test_cli_run_dry_run(tmp_path: Path) -> None:
    config_dir = _copy_config_tree(tmp_path)
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["run", "--tournament", "RNG Arena", "--config-dir", str(config_dir), "--dry-run"],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert "Bracket of 128" in result.stdout
    assert "28 byes" in result.stdout
    assert "Following: Daring Hero" in result.stdout


def test_cli_run_full_tournament(tmp_path: Path) -> None:
    config_dir = _copy_config_tree(tmp_path)
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["run", "--tournament", "Pocket Cup", "--config-dir", str(config_dir), "--seed", "7"],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert "Tournament complete" in result.stdout
    assert "Final" in result.stdout


def test_cli_run_reports_bye(tmp_path: Path) -> None:
    config_dir = _copy_config_tree(tmp_path)
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["run", "--tournament", "Lucky Draw", "--config-dir", str(config_dir)],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert "Lucky bye!" in result.stdout


def test_cli_run_exports_bracket(tmp_path: Path) -> None:
    config_dir = _copy_config_tree(tmp_path)
    export_dir = tmp_path / "reports"
    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "run",
            "--tournament",
            "RNG Arena",
            "--config-dir",
            str(config_dir),
            "--seed",
            "3",
            "--export",
            str(export_dir),
        ],
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    timestamp_dirs = list(export_dir.iterdir())
    assert len(timestamp_dirs) == 1
    data = json.loads((timestamp_dirs[0] / "bracket.json").read_text(encoding="utf-8"))
    assert data["bracket_size"] == 128
    assert data["champion"] is not None
    assert data["stats"]["matches_completed"] == 99
    assert data["rounds"][-1] == [data["champion"]]


def test_cli_run_unknown_tournament(tmp_path: Path) -> None:
    config_dir = _copy_config_tree(tmp_path)
    runner = CliRunner()
    result = runner.invoke(app, ["run", "--tournament", "Ghost Cup", "--config-dir", str(config_dir)])
    assert result.exit_code == 1
    assert "Config error" in result.stdout
