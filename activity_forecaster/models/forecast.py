"""
Location-level forecast payload.

``ActivityForecast`` is the complete answer for one location: where it is,
the week of weather that was scored, and the per-activity rankings.

``WeatherWeekSummary`` is a compact overview of that week used by the
terminal report header.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from activity_forecaster.models.ranking import ActivityRanking
from activity_forecaster.models.weather import DailyWeather

_MODEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class WeatherWeekSummary(BaseModel):
    """Aggregate statistics over a forecast window.

    Attributes:
        start_date: First day in the window (ISO).
        end_date: Last day in the window (ISO).
        days: Number of days summarized.
        avg_max_temp: Mean daily maximum (°C), 1 decimal.
        avg_min_temp: Mean daily minimum (°C), 1 decimal.
        lowest_temp: Lowest daily minimum (°C).
        highest_temp: Highest daily maximum (°C).
        total_precipitation: Sum of precipitation (mm), 1 decimal.
        rainy_days: Days with more than 1 mm of precipitation.
        total_snowfall: Sum of snowfall (cm), 1 decimal.
        snow_days: Days with any snowfall.
        avg_wind_speed: Mean daily max wind (km/h), 1 decimal.
        avg_cloud_cover: Mean cloud cover (%), 1 decimal.
        precipitation_outlook: ``"Dry week!"``, ``"Some rain expected"`` or
            ``"Very wet"`` (more than 4 rainy days).
        wind_description: ``"Calm"``, ``"Moderate"`` or ``"Strong"``.
        sky_description: ``"Mostly clear"``, ``"Partly cloudy"`` or
            ``"Mostly cloudy"``.
    """

    model_config = _MODEL_CONFIG

    start_date: str
    end_date: str
    days: int
    avg_max_temp: float
    avg_min_temp: float
    lowest_temp: float
    highest_temp: float
    total_precipitation: float
    rainy_days: int
    total_snowfall: float
    snow_days: int
    avg_wind_speed: float
    avg_cloud_cover: float
    precipitation_outlook: str
    wind_description: str
    sky_description: str


class ActivityForecast(BaseModel):
    """Weather and activity rankings for one location.

    Attributes:
        location: Display name, e.g. ``"Chamonix, France"``.
        latitude: Decimal degrees, -90..90.
        longitude: Decimal degrees, -180..180.
        daily_weather: The scored forecast days, date ascending.
        rankings: One ``ActivityRanking`` per activity, enumeration order.
    """

    model_config = _MODEL_CONFIG

    location: str
    latitude: float
    longitude: float
    daily_weather: list[DailyWeather]
    rankings: list[ActivityRanking]

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float) -> float:
        if not -90.0 <= v <= 90.0:
            raise ValueError(f"latitude must be in [-90, 90], got {v}.")
        return v

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float) -> float:
        if not -180.0 <= v <= 180.0:
            raise ValueError(f"longitude must be in [-180, 180], got {v}.")
        return v
