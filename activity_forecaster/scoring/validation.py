"""
Input validation for the scoring engine.

The engine has no defined behaviour for partial data, so every input day is
checked up front and the whole call fails if any day is unusable. Days may
arrive either as ``DailyWeather`` instances or as plain mappings (camelCase
or snake_case keys, e.g. straight from a JSON payload).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from pydantic import ValidationError

from activity_forecaster.models.weather import DailyWeather

# Cap on how many field problems are quoted in one error message.
_MAX_REPORTED_ERRORS = 10


class InvalidInputError(ValueError):
    """Raised when a weather sequence cannot be scored.

    Covers an empty sequence, a day with missing fields, and a day with
    non-numeric, NaN, infinite or out-of-range values.

    Attributes:
        day_index: Zero-based index of the offending day, or ``None`` when
            the problem is with the sequence as a whole.
        fields:    Names of the offending fields (may be empty).
    """

    def __init__(
        self,
        message: str,
        day_index: Optional[int] = None,
        fields: tuple[str, ...] = (),
    ) -> None:
        self.day_index = day_index
        self.fields    = fields
        super().__init__(message)


def coerce_weather_day(day: DailyWeather | Mapping[str, Any], index: int = 0) -> DailyWeather:
    """Return ``day`` as a validated ``DailyWeather``.

    Args:
        day:   A ``DailyWeather`` or a mapping of its fields.
        index: Position of the day in its sequence (for error messages).

    Raises:
        InvalidInputError: If the mapping fails validation or ``day`` is
            neither a model nor a mapping.
    """
    if isinstance(day, DailyWeather):
        return day
    if not isinstance(day, Mapping):
        raise InvalidInputError(
            f"Day {index}: expected a weather mapping, got {type(day).__name__}.",
            day_index=index,
        )
    try:
        return DailyWeather.model_validate(dict(day))
    except ValidationError as exc:
        errors = exc.errors()
        fields = tuple(str(e["loc"][0]) for e in errors if e.get("loc"))
        details = "; ".join(
            f"{'.'.join(str(p) for p in e['loc']) or '<day>'}: {e['msg']}"
            for e in errors[:_MAX_REPORTED_ERRORS]
        )
        raise InvalidInputError(
            f"Day {index} is not a valid weather record: {details}",
            day_index=index,
            fields=fields,
        ) from exc


def coerce_weather_days(
    days: Iterable[DailyWeather | Mapping[str, Any]],
) -> list[DailyWeather]:
    """Validate a full weather sequence, preserving order.

    Args:
        days: Daily weather records, date ascending.

    Returns:
        List of validated ``DailyWeather`` objects.

    Raises:
        InvalidInputError: If ``days`` is not a sequence of days, is empty, or
            any day is invalid.
    """
    # A lone day, mapping or string iterates, but not over days.
    if (
        isinstance(days, (str, bytes, Mapping, DailyWeather))
        or not isinstance(days, Iterable)
    ):
        raise InvalidInputError(
            f"Expected a sequence of weather days, got {type(days).__name__}."
        )
    validated = [coerce_weather_day(day, i) for i, day in enumerate(days)]
    if not validated:
        raise InvalidInputError(
            "Weather sequence is empty; at least one day is required to compute "
            "an average score."
        )
    return validated
