"""
Shared pytest fixtures for the Activity Forecaster test suite.

Provides:
  - ``make_day``: factory for ``DailyWeather`` with mild, neutral defaults.
  - ``powder_day`` / ``summer_day``: the two reference days used across
    scoring tests.
  - ``fixture_week``: the client's deterministic 7-day fixture, dated from
    2026-01-12.
  - ``test_config_file``: a TOML config that logs nowhere and writes to a
    temp directory.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from pathlib import Path

import pytest

from activity_forecaster.ingestion.open_meteo_client import OpenMeteoClient
from activity_forecaster.models.weather import DailyWeather

FIXTURE_START = date(2026, 1, 12)


@pytest.fixture
def make_day() -> Callable[..., DailyWeather]:
    """Return a ``DailyWeather`` factory; keyword arguments override defaults.

    Defaults (10°C, dry, 5 km/h wind, 50% cloud) trigger no adjustment in
    any rule except Indoor Sightseeing's nothing-at-all baseline.
    """

    def _make(**overrides) -> DailyWeather:
        values = {
            "date": "2026-01-12",
            "max_temp": 10.0,
            "min_temp": 2.0,
            "precipitation": 0.0,
            "wind_speed": 5.0,
            "snowfall": 0.0,
            "cloud_cover": 50.0,
        }
        values.update(overrides)
        return DailyWeather(**values)

    return _make


@pytest.fixture
def powder_day(make_day) -> DailyWeather:
    """Cold, snowy, light wind: Skiing scores 50."""
    return make_day(
        max_temp=1.0, min_temp=-5.0, precipitation=0.0,
        wind_speed=10.0, snowfall=4.0, cloud_cover=20.0,
    )


@pytest.fixture
def summer_day(make_day) -> DailyWeather:
    """Warm, dry, clear, breezy: Surfing 95, Outdoor 100, Indoor 70 (25°C sits on the
    strict comfort-band edge, so no nice-day penalty)."""
    return make_day(
        max_temp=25.0, min_temp=15.0, precipitation=0.0,
        wind_speed=20.0, snowfall=0.0, cloud_cover=10.0,
    )


@pytest.fixture
def fixture_week() -> list[DailyWeather]:
    return OpenMeteoClient().get_fixture_forecast(FIXTURE_START)


@pytest.fixture
def test_config_file(tmp_path: Path) -> Path:
    """Write a quiet config (no log file, WARNING level) and return its path."""
    path = tmp_path / "config" / "test.toml"
    path.parent.mkdir(parents=True)
    path.write_text(
        "[logging]\n"
        'level = "WARNING"\n'
        'log_file = ""\n'
        "\n"
        "[output]\n"
        f'output_dir = "{(tmp_path / "outputs").as_posix()}"\n',
        encoding="utf-8",
    )
    return path
