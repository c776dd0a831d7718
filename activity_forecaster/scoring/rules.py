"""
Per-activity scoring rules.

Every rule has the same shape: start from a baseline, apply conditional
adjustments from specific weather fields, clamp to [0, 100]. Arithmetic is
floating point; conversion to the stored integer happens in
``score_day()`` via ``round_half_up()``.

Rule summary
------------
Skiing (baseline 0):
    + min(50, snowfall * 5)       if snowfall > 0
    + 30 if max_temp < 2,  else + 15 if max_temp < 7
    - 15                          if wind_speed > 40
    - 10                          if precipitation > 5

Surfing (baseline 50):
    + 25 if 10 < wind_speed < 35, else - 20 if wind_speed > 40
      (35 <= wind_speed <= 40 applies neither)
    + 20                          if max_temp > 18
    - 15                          if precipitation > 8

Outdoor Sightseeing (baseline 60):
    + 20 if cloud_cover < 40,     else - 10 if cloud_cover > 80
    + 20 if 15 <= max_temp <= 28, else - 20 if max_temp < 5 or max_temp > 35
    - precipitation * 2           if precipitation > 0

Indoor Sightseeing (baseline 70):
    + 15                          if precipitation > 5
    + 15                          if max_temp < 5 or max_temp > 30
    - 20 if precipitation == 0 and cloud_cover < 50 and 15 < max_temp < 25

``ACTIVITY_SCORERS`` binds each ``Activity`` to its rule; iteration order
follows the ``Activity`` enumeration.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from activity_forecaster.models.weather import DailyWeather
from activity_forecaster.taxonomy.activity_taxonomy import Activity

ScoreFn = Callable[[DailyWeather], float]

SCORE_MIN = 0.0
SCORE_MAX = 100.0


def score_skiing(weather: DailyWeather) -> float:
    score = 0.0

    # Fresh snow, capped at 10 cm worth
    if weather.snowfall > 0:
        score += min(50.0, weather.snowfall * 5)

    if weather.max_temp < 2:
        score += 30
    elif weather.max_temp < 7:
        score += 15

    if weather.wind_speed > 40:
        score -= 15

    if weather.precipitation > 5:
        score -= 10

    return _clamp(score)


def score_surfing(weather: DailyWeather) -> float:
    score = 50.0

    # Wind between 35 and 40 km/h is neither rewarded nor penalised.
    if 10 < weather.wind_speed < 35:
        score += 25
    elif weather.wind_speed > 40:
        score -= 20

    if weather.max_temp > 18:
        score += 20

    if weather.precipitation > 8:
        score -= 15

    return _clamp(score)


def score_outdoor_sightseeing(weather: DailyWeather) -> float:
    score = 60.0

    if weather.cloud_cover < 40:
        score += 20
    elif weather.cloud_cover > 80:
        score -= 10

    if 15 <= weather.max_temp <= 28:
        score += 20
    elif weather.max_temp < 5 or weather.max_temp > 35:
        score -= 20

    if weather.precipitation > 0:
        score -= weather.precipitation * 2

    return _clamp(score)


def score_indoor_sightseeing(weather: DailyWeather) -> float:
    score = 70.0

    if weather.precipitation > 5:
        score += 15

    if weather.max_temp < 5 or weather.max_temp > 30:
        score += 15

    # Nice day outside: strict bounds on both ends of the comfort band.
    if (
        weather.precipitation == 0
        and weather.cloud_cover < 50
        and 15 < weather.max_temp < 25
    ):
        score -= 20

    return _clamp(score)


ACTIVITY_SCORERS: dict[Activity, ScoreFn] = {
    Activity.SKIING:              score_skiing,
    Activity.SURFING:             score_surfing,
    Activity.OUTDOOR_SIGHTSEEING: score_outdoor_sightseeing,
    Activity.INDOOR_SIGHTSEEING:  score_indoor_sightseeing,
}


def score_day(activity: Activity, weather: DailyWeather) -> int:
    """Score one day for one activity as a stored integer (0–100).

    Raises:
        KeyError: If ``activity`` has no registered rule.
    """
    return round_half_up(ACTIVITY_SCORERS[activity](weather))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's built-in ``round()`` rounds ties to even (``round(82.5) == 82``);
    scores must round ``82.5`` to ``83``.
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


# ── Helper ────────────────────────────────────────────────────────────────────

def _clamp(value: float, lo: float = SCORE_MIN, hi: float = SCORE_MAX) -> float:
    return max(lo, min(hi, value))
