"""
JSON weather-file loader.

Three layouts are accepted (detected from the top-level JSON value):

  1. A list of day objects::

       [{"date": "2026-01-12", "maxTemp": 1, "minTemp": -5, ...}, ...]

  2. A saved forecast payload with a ``dailyWeather`` list (the shape written
     by ``write_forecast_json``)::

       {"location": "...", "latitude": 45.92, "longitude": 6.87,
        "dailyWeather": [...], "rankings": [...]}

  3. A raw Open-Meteo response with a ``daily`` block of parallel series and
     top-level ``latitude`` / ``longitude``.

Day objects accept camelCase or snake_case keys.

``read_weather_file()`` also returns whatever location metadata the file
carries (layouts 2 and 3). A bare list of days carries none.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from activity_forecaster.ingestion.open_meteo_client import parse_daily_payload
from activity_forecaster.models.weather import DailyWeather
from activity_forecaster.scoring.validation import InvalidInputError, coerce_weather_days

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeatherFileContents:
    """Validated days plus the location metadata found in the file.

    Attributes:
        days:      Validated ``DailyWeather`` list in file order.
        latitude:  From the file, or ``None`` when absent.
        longitude: From the file, or ``None`` when absent.
        location:  Saved display name (forecast payloads only), else ``None``.
    """

    days: list[DailyWeather]
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    location: Optional[str] = None


def read_weather_file(path: Path) -> WeatherFileContents:
    """Read and validate a week of weather, keeping file-level metadata.

    Args:
        path: Path to the JSON file (must exist).

    Returns:
        ``WeatherFileContents`` for the file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        InvalidInputError: If the file is not valid JSON, has an unknown
            layout, carries unusable coordinates, or any day fails
            validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Weather file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise InvalidInputError(f"Weather file is not valid JSON: {path} ({exc})") from exc

    if isinstance(data, list):
        contents = WeatherFileContents(days=coerce_weather_days(data))
    elif isinstance(data, dict) and isinstance(data.get("dailyWeather"), list):
        latitude, longitude = _read_coordinates(data, path)
        location = data.get("location")
        contents = WeatherFileContents(
            days=coerce_weather_days(data["dailyWeather"]),
            latitude=latitude,
            longitude=longitude,
            location=location if isinstance(location, str) and location else None,
        )
    elif isinstance(data, dict) and "daily" in data:
        latitude, longitude = _read_coordinates(data, path)
        contents = WeatherFileContents(
            days=parse_daily_payload(data),
            latitude=latitude,
            longitude=longitude,
        )
    else:
        raise InvalidInputError(
            f"Unrecognised weather file layout in {path}: expected a list of days, "
            "an object with 'dailyWeather', or an Open-Meteo response with 'daily'."
        )

    logger.info(
        "Loaded %d weather days from %s", len(contents.days), path,
        extra={"source": str(path), "days": len(contents.days)},
    )
    return contents


def load_weather_file(path: Path) -> list[DailyWeather]:
    """Read and validate a week of weather from a JSON file.

    Same as ``read_weather_file(path).days``.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        InvalidInputError: If the file content cannot be scored.
    """
    return read_weather_file(path).days


def _read_coordinates(
    data: dict[str, Any], path: Path
) -> tuple[Optional[float], Optional[float]]:
    """Return ``(latitude, longitude)`` from a payload, or ``(None, None)``.

    Both keys must be present for either to be used.
    """
    latitude, longitude = data.get("latitude"), data.get("longitude")
    if latitude is None or longitude is None:
        return None, None

    for name, value in (("latitude", latitude), ("longitude", longitude)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidInputError(
                f"Weather file {path}: '{name}' must be a number, got {value!r}.",
                fields=(name,),
            )
    if not -90.0 <= latitude <= 90.0:
        raise InvalidInputError(
            f"Weather file {path}: latitude must be in [-90, 90], got {latitude}.",
            fields=("latitude",),
        )
    if not -180.0 <= longitude <= 180.0:
        raise InvalidInputError(
            f"Weather file {path}: longitude must be in [-180, 180], got {longitude}.",
            fields=("longitude",),
        )
    return float(latitude), float(longitude)
