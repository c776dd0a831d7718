"""
Activity Forecaster — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action (fetch / load weather, rank activities).
  5. Report result to stdout.

Install and run::

    pip install -e .
    activity-forecaster --help
    activity-forecaster validate-config
    activity-forecaster rank --lat 45.92 --lon 6.87 --location Chamonix
    activity-forecaster rank --lat 45.92 --lon 6.87 --fixture
    activity-forecaster rank --file data/week.json --json
    activity-forecaster rank --file data/week.json --csv data/outputs/scores.csv
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="activity-forecaster",
    help="Rank outdoor and indoor activities against a 7-day weather forecast.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from activity_forecaster.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config, verbose: bool = False):
    """Set up logging from config."""
    from activity_forecaster.utils.logging import configure_logging
    configure_logging(config.logging, verbose=verbose)


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
    typer.echo(f"  Forecast URL:     {config.open_meteo.forecast_url}")
    typer.echo(f"  Forecast days:    {config.open_meteo.forecast_days}")
    typer.echo(f"  Timezone:         {config.open_meteo.timezone}")
    typer.echo(f"  Output dir:       {config.output.output_dir}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("rank")
def rank(
    weather_file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="JSON weather file (list of days, saved forecast, or Open-Meteo response).",
    ),
    latitude: Optional[float] = typer.Option(
        None,
        "--lat",
        help="Latitude in decimal degrees (used with --lon).",
    ),
    longitude: Optional[float] = typer.Option(
        None,
        "--lon",
        help="Longitude in decimal degrees (used with --lat).",
    ),
    location: Optional[str] = typer.Option(
        None,
        "--location",
        "-l",
        help="Display name for the location.",
    ),
    use_fixture: bool = typer.Option(
        False,
        "--fixture",
        help="Use the built-in fixture week instead of calling Open-Meteo.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the full forecast payload as JSON instead of tables.",
    ),
    output_dir: Optional[str] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Also write the JSON payload to this directory.",
    ),
    csv_path: Optional[str] = typer.Option(
        None,
        "--csv",
        help="Also write per-day scores (one row per activity and day) to this CSV file.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log at DEBUG level regardless of config.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Score every activity for each forecast day and rank the week.

    \b
    Weather source (exactly one):
      --file PATH          read days from a JSON file
      --lat F --lon F      fetch from Open-Meteo (or --fixture for offline)
    """
    from activity_forecaster.ingestion.open_meteo_client import WeatherFetchError
    from activity_forecaster.pipeline.forecast import (
        forecast_for_coordinates,
        forecast_from_file,
        summarize_week,
    )
    from activity_forecaster.reporting.export import (
        export_daily_scores_csv,
        write_forecast_json,
    )
    from activity_forecaster.reporting.formatters import (
        format_rankings_table,
        format_week_summary,
    )

    config = _load_config_or_exit(config_path)
    _configure_logging(config, verbose=verbose)

    has_coords = latitude is not None and longitude is not None
    if weather_file and (latitude is not None or longitude is not None):
        typer.echo("[ERROR] Use either --file or --lat/--lon, not both.", err=True)
        raise typer.Exit(code=1)
    if not weather_file and not has_coords:
        typer.echo("[ERROR] Provide --file, or both --lat and --lon.", err=True)
        raise typer.Exit(code=1)

    try:
        if weather_file:
            forecast = forecast_from_file(Path(weather_file), location=location)
        else:
            forecast = forecast_for_coordinates(
                config,
                latitude,
                longitude,
                location=location,
                use_fixture=use_fixture,
            )
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (WeatherFetchError, ValueError) as exc:
        # ValueError covers InvalidInputError and out-of-range coordinates.
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        payload = forecast.model_dump(mode="json", by_alias=True)
        typer.echo(json.dumps(payload, indent=config.output.json_indent, ensure_ascii=False))
    else:
        typer.echo(
            format_week_summary(summarize_week(forecast.daily_weather), forecast.location)
        )
        typer.echo(format_rankings_table(forecast.rankings))

    if output_dir:
        path = write_forecast_json(
            forecast, Path(output_dir), indent=config.output.json_indent
        )
        typer.echo(f"[OK] Forecast written to {path}", err=as_json)

    if csv_path:
        path = export_daily_scores_csv(forecast, Path(csv_path))
        typer.echo(f"[OK] Daily scores written to {path}", err=as_json)


if __name__ == "__main__":
    app()
