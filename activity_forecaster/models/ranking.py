"""
Scoring engine output models.

``ActivityDayScore`` is one activity's score for one day.
``ActivityRanking`` aggregates a full week of day scores for one activity
together with its rounded average and recommendation text.

Both models are frozen and are rebuilt from scratch on every engine call.
Serialized with camelCase aliases (``averageScore``, ``dailyScores``) so the
payload matches what downstream presenters consume.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from activity_forecaster.taxonomy.activity_taxonomy import Activity, ConditionLabel

_MODEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ActivityDayScore(BaseModel):
    """One activity's suitability for one day.

    Attributes:
        date: Copied from the input ``DailyWeather.date``.
        score: Integer suitability, 0–100.
        conditions: Label bucket derived from ``score``.
    """

    model_config = _MODEL_CONFIG

    date: str
    score: int = Field(ge=0, le=100)
    conditions: ConditionLabel


class ActivityRanking(BaseModel):
    """Week-level evaluation of one activity.

    Attributes:
        activity: Which activity this ranking describes.
        average_score: Rounded mean of ``daily_scores``, 0–100.
        daily_scores: One entry per input day, in input order.
        recommendation: Human-readable verdict derived from ``average_score``.
    """

    model_config = _MODEL_CONFIG

    activity: Activity
    average_score: int = Field(ge=0, le=100)
    daily_scores: list[ActivityDayScore]
    recommendation: str

    @field_validator("daily_scores")
    @classmethod
    def validate_daily_scores_not_empty(
        cls, v: list[ActivityDayScore]
    ) -> list[ActivityDayScore]:
        if not v:
            raise ValueError("daily_scores must contain at least one day.")
        return v
