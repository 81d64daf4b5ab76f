"""
RuneScape Lookup — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Read the input file(s).
  4. Convert / merge.
  5. Print the result as JSON to stdout.

Install and run::

    pip install -e .
    rs-lookup --help
    rs-lookup validate-config
    rs-lookup convert zezima.txt --format index-lite
    rs-lookup merge-feeds stored.xml fetched.xml --format adventurers-log
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer

from rs_lookup.conversion.converter import FEED_FORMATS, DataFormat

app = typer.Typer(
    name="rs-lookup",
    help="Convert RuneScape highscore, RuneMetrics and adventurer's log responses.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from rs_lookup.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from rs_lookup.utils.logging import configure_logging
    configure_logging(config.logging)


def _read_payload(path: Path) -> bytes:
    if not path.exists():
        typer.echo(f"[ERROR] Input file not found: {path}", err=True)
        raise typer.Exit(code=1)
    return path.read_bytes()


def _summarize(result: dict[str, Any]) -> dict[str, Any]:
    """Render converter results as JSON-ready values."""
    from rs_lookup.exceptions import IncompleteSnapshotError
    from rs_lookup.models.feed import ActivityFeed
    from rs_lookup.models.highscore import HighscoreSnapshot

    summary: dict[str, Any] = {}
    for key, value in result.items():
        if isinstance(value, HighscoreSnapshot):
            dumped = value.model_dump(mode="json", exclude={"raw_text"})
            if value.skills:
                try:
                    dumped["combat_level"] = value.combat_level()
                except IncompleteSnapshotError:
                    dumped["combat_level"] = None
            summary[key] = dumped
        elif isinstance(value, ActivityFeed):
            summary[key] = value.model_dump(mode="json")["items"]
        else:
            summary[key] = value
    return summary


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Default ruleset:  {config.parsing.default_ruleset}")
    typer.echo(f"  Source timezone:  {config.parsing.source_timezone}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(mode="json"), indent=2))


@app.command("convert")
def convert(
    input_path: Path = typer.Argument(..., help="File holding the raw API response."),
    fmt: Optional[DataFormat] = typer.Option(
        None,
        "--format",
        help="Wire format. Defaults to index_lite for the configured ruleset.",
    ),
    player_name: Optional[str] = typer.Option(
        None,
        "--player",
        help="Name of the player the response belongs to.",
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Convert one API response and print the result as JSON."""
    from rs_lookup.conversion.converter import PlayerDataConverter
    from rs_lookup.exceptions import DataConversionError
    from rs_lookup.models.highscore import Player

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    converter = PlayerDataConverter(config.parsing)
    fmt = fmt or converter.lite_format_for()
    player = Player(name=player_name) if player_name else None
    payload = _read_payload(input_path)

    try:
        result = converter.convert(payload, fmt, player=player)
    except DataConversionError as exc:
        typer.echo(f"[ERROR] {type(exc).__name__}: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(_summarize(result), indent=2))


@app.command("merge-feeds")
def merge_feeds_command(
    older_path: Path = typer.Argument(..., help="Previously stored response."),
    newer_path: Path = typer.Argument(..., help="Freshly fetched response."),
    fmt: DataFormat = typer.Option(
        DataFormat.ADVENTURERS_LOG,
        "--format",
        help="Wire format of both files (rune-metrics or adventurers-log).",
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Merge the activity feeds of two responses and print the merged feed."""
    from rs_lookup.conversion.common import KEY_ACTIVITY_FEED
    from rs_lookup.conversion.converter import PlayerDataConverter
    from rs_lookup.exceptions import DataConversionError
    from rs_lookup.merger import merge_feeds

    if fmt not in FEED_FORMATS:
        typer.echo(f"[ERROR] Format '{fmt}' carries no activity feed.", err=True)
        raise typer.Exit(code=1)

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    converter = PlayerDataConverter(config.parsing)
    try:
        older = converter.convert(_read_payload(older_path), fmt)[KEY_ACTIVITY_FEED]
        newer = converter.convert(_read_payload(newer_path), fmt)[KEY_ACTIVITY_FEED]
    except DataConversionError as exc:
        typer.echo(f"[ERROR] {type(exc).__name__}: {exc}", err=True)
        raise typer.Exit(code=1)

    merged = merge_feeds(older, newer)
    typer.echo(json.dumps(merged.model_dump(mode="json")["items"], indent=2))


if __name__ == "__main__":
    app()
