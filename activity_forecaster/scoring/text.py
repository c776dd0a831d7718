"""
Text helpers: day-level condition labels and week-level recommendations.

Thresholds
----------
classify_conditions(score):
    >= 75 → Great,  >= 60 → Good,  >= 40 → OK,  else Poor

build_recommendation(activity, average_score):
    >= 70 → "Perfect week for {activity}!"
    >= 50 → "Decent conditions for {activity} this week."
    else  → "Not the best week for {activity}."
"""

from __future__ import annotations

from activity_forecaster.taxonomy.activity_taxonomy import Activity, ConditionLabel

# (minimum score, label): first match from the top wins.
_CONDITION_THRESHOLDS: tuple[tuple[int, ConditionLabel], ...] = (
    (75, ConditionLabel.GREAT),
    (60, ConditionLabel.GOOD),
    (40, ConditionLabel.OK),
)


def classify_conditions(score: float) -> ConditionLabel:
    """Map a daily score to its condition label."""
    for threshold, label in _CONDITION_THRESHOLDS:
        if score >= threshold:
            return label
    return ConditionLabel.POOR


def build_recommendation(activity: Activity | str, average_score: float) -> str:
    """Return the week-level recommendation sentence for one activity.

    Args:
        activity:      Activity (or its display name) substituted into the text.
        average_score: Rounded weekly average, 0–100.
    """
    name = str(activity)
    if average_score >= 70:
        return f"Perfect week for {name}!"
    if average_score >= 50:
        return f"Decent conditions for {name} this week."
    return f"Not the best week for {name}."
