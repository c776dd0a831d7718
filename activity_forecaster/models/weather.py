"""
Daily weather observation model — the scoring engine's only input.

``DailyWeather`` is one calendar day of a location's forecast, already
unit-normalized by the upstream fetcher:

    max_temp / min_temp  °C (may be negative)
    precipitation        mm, >= 0
    wind_speed           km/h, >= 0
    snowfall             cm, >= 0
    cloud_cover          percent, 0–100

Field names are snake_case in Python and camelCase on the wire
(``maxTemp``, ``windSpeed``, ...). Either spelling is accepted on input;
``model_dump(by_alias=True)`` emits camelCase.

The model is strict: strings are never coerced to numbers, and NaN / ±inf
are rejected. A day that cannot be validated is never scored.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

WEATHER_FIELDS: tuple[str, ...] = (
    "date",
    "max_temp",
    "min_temp",
    "precipitation",
    "wind_speed",
    "snowfall",
    "cloud_cover",
)


class DailyWeather(BaseModel):
    """One day of forecast weather for a single location.

    Attributes:
        date: Calendar date, ISO ``YYYY-MM-DD``.
        max_temp: Daily maximum temperature (°C).
        min_temp: Daily minimum temperature (°C).
        precipitation: Total precipitation (mm).
        wind_speed: Maximum wind speed at 10 m (km/h).
        snowfall: Total snowfall (cm).
        cloud_cover: Mean cloud cover (%).
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        allow_inf_nan=False,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    date: str
    max_temp: float
    min_temp: float
    precipitation: float = Field(ge=0.0)
    wind_speed: float = Field(ge=0.0)
    snowfall: float = Field(ge=0.0)
    cloud_cover: float = Field(ge=0.0, le=100.0)

    @field_validator("date")
    @classmethod
    def validate_iso_date(cls, v: str) -> str:
        try:
            datetime.strptime(v, "%Y-%m-%d")
        except ValueError:
            raise ValueError(f"date must be ISO YYYY-MM-DD, got '{v}'.") from None
        return v
