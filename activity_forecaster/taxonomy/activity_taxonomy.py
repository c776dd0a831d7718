"""
Activity taxonomy.

Two fixed enumerations describe every ranking:
  - ``Activity``       — the *what*: which activity is being scored?
  - ``ConditionLabel`` — the *how good*: coarse bucket for one day's score.

Enum values are the exact display strings that appear in output payloads
and recommendation text, so ``str(Activity.SKIING) == "Skiing"``.

Member declaration order is significant: ``Activity`` iteration order is the
order in which rankings are produced.

This module has NO imports from any other ``activity_forecaster`` package.
"""

from enum import StrEnum


class Activity(StrEnum):
    """An activity whose weather suitability is scored."""

    SKIING = "Skiing"
    """Wants snowfall and cold; penalised by gales and rain."""

    SURFING = "Surfing"
    """Wants moderate wind and warmth; penalised by storms and heavy rain."""

    OUTDOOR_SIGHTSEEING = "Outdoor Sightseeing"
    """Wants clear skies and comfortable temperatures; any rain hurts."""

    INDOOR_SIGHTSEEING = "Indoor Sightseeing"
    """Always a decent option; gains appeal when the weather turns bad."""


class ConditionLabel(StrEnum):
    """Coarse textual bucket derived from a 0–100 daily score."""

    GREAT = "Great"
    """Score >= 75."""

    GOOD = "Good"
    """Score 60–74."""

    OK = "OK"
    """Score 40–59."""

    POOR = "Poor"
    """Score below 40."""
