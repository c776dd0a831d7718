"""
Open-Meteo daily forecast client.

API:   https://api.open-meteo.com/v1/forecast
Docs:  https://open-meteo.com/en/docs

No API key is required. The client requests six daily variables, one value
per forecast day:

    temperature_2m_max   °C     → DailyWeather.max_temp
    temperature_2m_min   °C     → DailyWeather.min_temp
    precipitation_sum    mm     → DailyWeather.precipitation  (null → 0)
    windspeed_10m_max    km/h   → DailyWeather.wind_speed
    snowfall_sum         cm     → DailyWeather.snowfall       (null → 0)
    cloudcover_mean      %      → DailyWeather.cloud_cover

Other nulls are passed through and rejected by model validation, so a day
with a missing temperature raises ``InvalidInputError`` instead of being
scored on invented data.

Coordinates only: place-name lookup is the caller's job. There is no retry
or caching layer; a failed request raises ``WeatherFetchError``.

Fixture mode (``get_fixture_forecast``) returns a deterministic mixed week
for offline runs and tests.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, timedelta
from typing import Any, ClassVar, Optional

import httpx

from activity_forecaster.config import OpenMeteoConfig
from activity_forecaster.models.weather import DailyWeather
from activity_forecaster.scoring.validation import InvalidInputError, coerce_weather_days

logger = logging.getLogger(__name__)

# DailyWeather field → accepted Open-Meteo daily keys (legacy name first,
# current name second; the API echoes whichever spelling was requested).
DAILY_VARIABLES: dict[str, tuple[str, ...]] = {
    "max_temp":      ("temperature_2m_max",),
    "min_temp":      ("temperature_2m_min",),
    "precipitation": ("precipitation_sum",),
    "wind_speed":    ("windspeed_10m_max", "wind_speed_10m_max"),
    "snowfall":      ("snowfall_sum",),
    "cloud_cover":   ("cloudcover_mean", "cloud_cover_mean"),
}

# Fields where a null reading means "none fell".
_ZERO_WHEN_NULL = frozenset({"precipitation", "snowfall"})


class WeatherFetchError(RuntimeError):
    """Raised when the forecast endpoint cannot be reached or returns an error.

    Attributes:
        latitude:    Requested latitude.
        longitude:   Requested longitude.
        status_code: HTTP status, or ``None`` for transport failures.
    """

    def __init__(
        self,
        latitude: float,
        longitude: float,
        reason: str,
        status_code: Optional[int] = None,
    ) -> None:
        self.latitude    = latitude
        self.longitude   = longitude
        self.status_code = status_code
        super().__init__(
            f"Weather forecast failed for ({latitude}, {longitude}): {reason}"
        )


# ── Client ─────────────────────────────────────────────────────────────────────

class OpenMeteoClient:
    """Client for the Open-Meteo daily forecast API.

    Usage (fixture mode — no network)::

        client = OpenMeteoClient()
        days = client.get_fixture_forecast(date(2026, 1, 12))

    Usage (live)::

        client = OpenMeteoClient(config.open_meteo)
        days = client.fetch_daily_forecast(45.92, 6.87)

    Attributes:
        config:      Endpoint settings (URL, days, timezone, timeout).
        http_client: Optional shared ``httpx.Client``. When ``None`` a
                     short-lived client is opened per request.
    """

    # A mixed alpine week: two powder days, a thaw, a warm clear spell, rain.
    FIXTURE_DAYS: ClassVar[list[dict[str, float]]] = [
        {"max_temp": -2.0, "min_temp": -9.0, "precipitation": 4.0,
         "wind_speed": 18.0, "snowfall": 12.0, "cloud_cover": 90.0},
        {"max_temp": 0.5,  "min_temp": -7.5, "precipitation": 1.2,
         "wind_speed": 12.0, "snowfall": 6.0,  "cloud_cover": 65.0},
        {"max_temp": 4.0,  "min_temp": -3.0, "precipitation": 0.0,
         "wind_speed": 44.0, "snowfall": 0.0,  "cloud_cover": 35.0},
        {"max_temp": 9.5,  "min_temp": 1.0,  "precipitation": 7.5,
         "wind_speed": 26.0, "snowfall": 0.0,  "cloud_cover": 85.0},
        {"max_temp": 19.0, "min_temp": 8.0,  "precipitation": 0.0,
         "wind_speed": 22.0, "snowfall": 0.0,  "cloud_cover": 15.0},
        {"max_temp": 23.0, "min_temp": 12.0, "precipitation": 0.0,
         "wind_speed": 37.0, "snowfall": 0.0,  "cloud_cover": 30.0},
        {"max_temp": 16.0, "min_temp": 9.0,  "precipitation": 12.0,
         "wind_speed": 31.0, "snowfall": 0.0,  "cloud_cover": 95.0},
    ]

    def __init__(
        self,
        config: Optional[OpenMeteoConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config or OpenMeteoConfig()
        self.http_client = http_client

    # ── Live API ───────────────────────────────────────────────────────────────

    def fetch_daily_forecast(self, latitude: float, longitude: float) -> list[DailyWeather]:
        """Fetch and parse the daily forecast for one location.

        Args:
            latitude:  Decimal degrees, -90..90.
            longitude: Decimal degrees, -180..180.

        Returns:
            ``DailyWeather`` list, date ascending (``config.forecast_days`` long).

        Raises:
            ValueError:        If coordinates are out of range.
            WeatherFetchError: On transport failure or a non-2xx response.
            InvalidInputError: If the response body cannot be turned into
                               valid weather days.
        """
        _validate_coordinates(latitude, longitude)

        params = {
            "latitude": latitude,
            "longitude": longitude,
            "daily": ",".join(keys[0] for keys in DAILY_VARIABLES.values()),
            "timezone": self.config.timezone,
            "forecast_days": self.config.forecast_days,
        }

        try:
            if self.http_client is not None:
                resp = self._get(self.http_client, params)
            else:
                with httpx.Client() as client:
                    resp = self._get(client, params)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise WeatherFetchError(
                latitude, longitude,
                f"HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise WeatherFetchError(latitude, longitude, str(exc) or type(exc).__name__) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise InvalidInputError("Forecast response is not valid JSON.") from exc

        days = parse_daily_payload(payload)
        logger.info(
            "Open-Meteo: %d forecast days for (%.4f, %.4f)",
            len(days), latitude, longitude,
            extra={"latitude": latitude, "longitude": longitude, "days": len(days)},
        )
        return days

    def _get(self, client: httpx.Client, params: dict[str, Any]) -> httpx.Response:
        return client.get(
            self.config.forecast_url,
            params=params,
            timeout=self.config.timeout_seconds,
        )

    # ── Fixture mode ───────────────────────────────────────────────────────────

    def get_fixture_forecast(self, start_date: Optional[date] = None) -> list[DailyWeather]:
        """Return the fixture week, dated consecutively from ``start_date``.

        Args:
            start_date: First forecast day. Defaults to today.

        Returns:
            Seven ``DailyWeather`` records.
        """
        start = start_date or date.today()
        days = [
            DailyWeather(date=(start + timedelta(days=i)).isoformat(), **values)
            for i, values in enumerate(self.FIXTURE_DAYS)
        ]
        logger.debug(
            "OpenMeteoClient: returning %d fixture days from %s", len(days), start,
            extra={"days": len(days), "fixture": True},
        )
        return days


# ── Response parsing ───────────────────────────────────────────────────────────

def parse_daily_payload(payload: Mapping[str, Any]) -> list[DailyWeather]:
    """Convert an Open-Meteo response (or its ``daily`` block) to weather days.

    Args:
        payload: Either the full JSON response (with a ``daily`` key) or the
                 ``daily`` object itself.

    Returns:
        Validated ``DailyWeather`` list in the order of ``daily.time``.

    Raises:
        InvalidInputError: If required series are missing, series lengths
            disagree, there are no days, or any day fails validation.
    """
    if not isinstance(payload, Mapping):
        raise InvalidInputError(
            f"Forecast payload must be a JSON object, got {type(payload).__name__}."
        )
    daily = payload.get("daily", payload)
    if not isinstance(daily, Mapping):
        raise InvalidInputError("Forecast payload 'daily' block must be a JSON object.")

    dates = daily.get("time")
    if not isinstance(dates, list):
        raise InvalidInputError("Forecast payload is missing the 'daily.time' series.")

    series: dict[str, list[Any]] = {}
    missing: list[str] = []
    for field_name, keys in DAILY_VARIABLES.items():
        values = next((daily[k] for k in keys if k in daily), None)
        if not isinstance(values, list):
            missing.append(keys[0])
            continue
        if len(values) != len(dates):
            raise InvalidInputError(
                f"Series '{keys[0]}' has {len(values)} values for {len(dates)} days.",
                fields=(field_name,),
            )
        series[field_name] = values
    if missing:
        raise InvalidInputError(
            f"Forecast payload is missing daily series: {missing}",
            fields=tuple(missing),
        )

    records: list[dict[str, Any]] = []
    for i, day in enumerate(dates):
        record: dict[str, Any] = {"date": day}
        for field_name, values in series.items():
            value = values[i]
            if value is None and field_name in _ZERO_WHEN_NULL:
                value = 0.0
            record[field_name] = value
        records.append(record)

    return coerce_weather_days(records)


def _validate_coordinates(latitude: float, longitude: float) -> None:
    if not -90.0 <= latitude <= 90.0:
        raise ValueError(f"latitude must be in [-90, 90], got {latitude}.")
    if not -180.0 <= longitude <= 180.0:
        raise ValueError(f"longitude must be in [-180, 180], got {longitude}.")
