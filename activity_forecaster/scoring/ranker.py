"""
Ranking aggregator: scores every day for every activity and rolls the week
up into one ``ActivityRanking`` per activity.

Usage flow
----------
1. rank_activities(weather_days)
   -> list[ActivityRanking]  (fixed Activity enumeration order)

2. sort_by_average_score(rankings)       (optional, presentation only)
   -> list[ActivityRanking]  (average_score descending, stable)

The aggregator deliberately does not sort by score: ordering for display is
the presenter's decision.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from activity_forecaster.models.ranking import ActivityDayScore, ActivityRanking
from activity_forecaster.models.weather import DailyWeather
from activity_forecaster.scoring.rules import ACTIVITY_SCORERS, round_half_up, score_day
from activity_forecaster.scoring.text import build_recommendation, classify_conditions
from activity_forecaster.scoring.validation import coerce_weather_days
from activity_forecaster.taxonomy.activity_taxonomy import Activity

logger = logging.getLogger(__name__)


def rank_activities(
    weather_days: Iterable[DailyWeather | Mapping[str, Any]],
) -> list[ActivityRanking]:
    """Evaluate every activity against a week of weather.

    Args:
        weather_days: Daily weather records, date ascending. ``DailyWeather``
            instances or mappings of their fields.

    Returns:
        One ``ActivityRanking`` per activity, in ``Activity`` order. Each
        ranking's ``daily_scores`` follows input day order.

    Raises:
        InvalidInputError: If ``weather_days`` is not a sequence of days, is
            empty, or any day is invalid.
    """
    days = coerce_weather_days(weather_days)

    rankings = [_rank_one(activity, days) for activity in ACTIVITY_SCORERS]

    logger.debug(
        "Ranked %d activities over %d days (%s .. %s)",
        len(rankings), len(days), days[0].date, days[-1].date,
        extra={"days": len(days)},
    )
    return rankings


def sort_by_average_score(rankings: Sequence[ActivityRanking]) -> list[ActivityRanking]:
    """Return rankings ordered best-first.

    Ties keep their incoming (enumeration) order.
    """
    return sorted(rankings, key=lambda r: -r.average_score)


def average_score(daily_scores: Sequence[ActivityDayScore]) -> int:
    """Rounded mean of integer day scores (ties round half up)."""
    total = sum(d.score for d in daily_scores)
    return round_half_up(total / len(daily_scores))


# ── Internal ──────────────────────────────────────────────────────────────────

def _rank_one(activity: Activity, days: list[DailyWeather]) -> ActivityRanking:
    daily_scores: list[ActivityDayScore] = []
    for day in days:
        score = score_day(activity, day)
        daily_scores.append(
            ActivityDayScore(
                date=day.date,
                score=score,
                conditions=classify_conditions(score),
            )
        )

    avg = average_score(daily_scores)
    return ActivityRanking(
        activity=activity,
        average_score=avg,
        daily_scores=daily_scores,
        recommendation=build_recommendation(activity, avg),
    )
