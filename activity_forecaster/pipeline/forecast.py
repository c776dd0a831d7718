"""
Forecast assembly — one location, one week, all activities.

Flow
----
  1. Obtain ``DailyWeather`` days (Open-Meteo, fixture week, or a JSON file).
  2. Score and rank every activity via ``rank_activities()``.
  3. Package weather + rankings into an ``ActivityForecast``.

``summarize_week()`` produces the header statistics shown above the ranking
table. It is independent of scoring and never affects scores.

Log records from this module carry ``location``, ``days`` and ``fixture``
(or ``source`` for file input) as ``extra=`` fields.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from pathlib import Path
from typing import Optional

from activity_forecaster.config import AppConfig
from activity_forecaster.ingestion.open_meteo_client import OpenMeteoClient
from activity_forecaster.ingestion.weather_file import read_weather_file
from activity_forecaster.models.forecast import ActivityForecast, WeatherWeekSummary
from activity_forecaster.models.weather import DailyWeather
from activity_forecaster.scoring.ranker import rank_activities
from activity_forecaster.scoring.validation import InvalidInputError

logger = logging.getLogger(__name__)

# Days with more precipitation than this count as rainy (mm).
RAINY_DAY_MM = 1.0

# (upper bound exclusive, label): first match from the top wins.
_WIND_BUCKETS: tuple[tuple[float, str], ...] = ((15.0, "Calm"), (30.0, "Moderate"))
_SKY_BUCKETS: tuple[tuple[float, str], ...] = ((30.0, "Mostly clear"), (70.0, "Partly cloudy"))


def build_activity_forecast(
    days: Sequence[DailyWeather],
    location: str,
    latitude: float,
    longitude: float,
) -> ActivityForecast:
    """Rank activities for ``days`` and wrap the result with its location.

    Raises:
        InvalidInputError: If ``days`` is empty or invalid.
    """
    rankings = rank_activities(days)
    return ActivityForecast(
        location=location,
        latitude=latitude,
        longitude=longitude,
        daily_weather=list(days),
        rankings=rankings,
    )


def forecast_for_coordinates(
    config: AppConfig,
    latitude: float,
    longitude: float,
    location: Optional[str] = None,
    use_fixture: bool = False,
    client: Optional[OpenMeteoClient] = None,
    start_date: Optional[date] = None,
) -> ActivityForecast:
    """Fetch (or fabricate, in fixture mode) a week of weather and rank it.

    Args:
        config:      Application config (Open-Meteo section is used).
        latitude:    Decimal degrees.
        longitude:   Decimal degrees.
        location:    Display name; defaults to the formatted coordinates.
        use_fixture: Skip the network and use the fixture week.
        client:      Pre-built client (tests); built from config when ``None``.
        start_date:  First fixture day (fixture mode only).

    Raises:
        ValueError:        Coordinates out of range.
        WeatherFetchError: Live fetch failed.
        InvalidInputError: Fetched data cannot be scored.
    """
    client = client or OpenMeteoClient(config.open_meteo)
    if use_fixture:
        days = client.get_fixture_forecast(start_date)
    else:
        days = client.fetch_daily_forecast(latitude, longitude)

    name = location or f"{latitude:.2f}, {longitude:.2f}"
    logger.info(
        "Ranking activities for %s (%d days, fixture=%s)", name, len(days), use_fixture,
        extra={"location": name, "days": len(days), "fixture": use_fixture},
    )
    return build_activity_forecast(days, name, latitude, longitude)


def forecast_from_file(
    path: Path,
    location: Optional[str] = None,
    latitude: Optional[float] = None,
    longitude: Optional[float] = None,
) -> ActivityForecast:
    """Rank activities for a week of weather stored in a JSON file.

    Metadata resolution, first available wins:

      location:            argument → saved forecast ``location`` → file stem
      latitude/longitude:  arguments → coordinates in the file → ``0.0, 0.0``

    The ``0.0, 0.0`` fallback only applies to a bare list of days, which
    carries no coordinates; an INFO record notes it.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        InvalidInputError: If the file content cannot be scored.
    """
    path = Path(path)
    contents = read_weather_file(path)
    name = location or contents.location or path.stem

    if latitude is None or longitude is None:
        if contents.latitude is not None and contents.longitude is not None:
            latitude, longitude = contents.latitude, contents.longitude
        else:
            logger.info(
                "%s carries no coordinates; reporting 0.0, 0.0", path,
                extra={"location": name, "source": str(path)},
            )
            latitude, longitude = 0.0, 0.0

    logger.info(
        "Ranking activities for %s from %s", name, path,
        extra={"location": name, "days": len(contents.days), "source": str(path)},
    )
    return build_activity_forecast(contents.days, name, latitude, longitude)


def summarize_week(days: Sequence[DailyWeather]) -> WeatherWeekSummary:
    """Aggregate a forecast window into headline statistics.

    Averages and totals are rounded to one decimal before the descriptive
    buckets are chosen, so the label always agrees with the printed figure.

    Raises:
        InvalidInputError: If ``days`` is empty.
    """
    if not days:
        raise InvalidInputError("Cannot summarize an empty weather sequence.")

    n = len(days)
    rainy_days = sum(1 for d in days if d.precipitation > RAINY_DAY_MM)
    avg_wind_speed = round(sum(d.wind_speed for d in days) / n, 1)
    avg_cloud_cover = round(sum(d.cloud_cover for d in days) / n, 1)

    return WeatherWeekSummary(
        start_date=days[0].date,
        end_date=days[-1].date,
        days=n,
        avg_max_temp=round(sum(d.max_temp for d in days) / n, 1),
        avg_min_temp=round(sum(d.min_temp for d in days) / n, 1),
        lowest_temp=min(d.min_temp for d in days),
        highest_temp=max(d.max_temp for d in days),
        total_precipitation=round(sum(d.precipitation for d in days), 1),
        rainy_days=rainy_days,
        total_snowfall=round(sum(d.snowfall for d in days), 1),
        snow_days=sum(1 for d in days if d.snowfall > 0),
        avg_wind_speed=avg_wind_speed,
        avg_cloud_cover=avg_cloud_cover,
        precipitation_outlook=_precipitation_outlook(rainy_days),
        wind_description=_bucket(avg_wind_speed, _WIND_BUCKETS, "Strong"),
        sky_description=_bucket(avg_cloud_cover, _SKY_BUCKETS, "Mostly cloudy"),
    )


def _precipitation_outlook(rainy_days: int) -> str:
    if rainy_days == 0:
        return "Dry week!"
    if rainy_days > 4:
        return "Very wet"
    return "Some rain expected"


def _bucket(value: float, buckets: tuple[tuple[float, str], ...], default: str) -> str:
    for upper, label in buckets:
        if value < upper:
            return label
    return default
