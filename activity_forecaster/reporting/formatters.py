"""
ASCII terminal formatters for the ``rank`` command.

All formatters accept models and return plain multi-line strings suitable
for ``typer.echo()``. No third-party dependencies (no ``rich``, no
``colorama``).

Ranking order
-------------
The scoring engine returns activities in fixed enumeration order. Display
order is decided here: best weekly average first, ties in enumeration order.
"""

from __future__ import annotations

from collections.abc import Sequence

from activity_forecaster.models.forecast import WeatherWeekSummary
from activity_forecaster.models.ranking import ActivityRanking
from activity_forecaster.scoring.ranker import sort_by_average_score


# ── Week summary ──────────────────────────────────────────────────────────────


def format_week_summary(summary: WeatherWeekSummary, location: str = "") -> str:
    """Format headline weather statistics for the forecast window.

    The snow line is omitted for a week without snowfall.

    Example::

        === Weather Week ===
          Location:      Chamonix
          Window:        2026-01-12 .. 2026-01-18 (7 days)
          Temperature:   avg high 10.0°C / avg low 1.5°C (range -9.0°C to 23.0°C)
          Precipitation: 24.7 mm total, 4 days with rain (Some rain expected)
          Snowfall:      18.0 cm total, 2 days with snow
          Wind:          27.1 km/h avg (Moderate winds)
          Cloud cover:   59.3% avg (Partly cloudy)
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Weather Week ===")
    if location:
        lines.append(f"  Location:      {location}")
    lines.append(
        f"  Window:        {summary.start_date} .. {summary.end_date} ({summary.days} days)"
    )
    lines.append(
        f"  Temperature:   avg high {summary.avg_max_temp:.1f}°C"
        f" / avg low {summary.avg_min_temp:.1f}°C"
        f" (range {summary.lowest_temp:.1f}°C to {summary.highest_temp:.1f}°C)"
    )
    lines.append(
        f"  Precipitation: {summary.total_precipitation:.1f} mm total, "
        f"{_days(summary.rainy_days)} with rain ({summary.precipitation_outlook})"
    )
    if summary.total_snowfall > 0:
        lines.append(
            f"  Snowfall:      {summary.total_snowfall:.1f} cm total, "
            f"{_days(summary.snow_days)} with snow"
        )
    lines.append(
        f"  Wind:          {summary.avg_wind_speed:.1f} km/h avg"
        f" ({summary.wind_description} winds)"
    )
    lines.append(
        f"  Cloud cover:   {summary.avg_cloud_cover:.1f}% avg ({summary.sky_description})"
    )
    return "\n".join(lines)


def _days(count: int) -> str:
    return f"{count} day" if count == 1 else f"{count} days"


# ── Rankings ──────────────────────────────────────────────────────────────────


def format_rankings_table(rankings: Sequence[ActivityRanking]) -> str:
    """Format activity rankings as an ASCII table, best first.

    One row per activity with its weekly average and each day's score;
    the recommendation sentence follows on an indented line::

        Rank  Activity              Avg  01-12  01-13  ...
        ------------------------------------------------
           1  Indoor Sightseeing     75     85     85  ...
              -> Perfect week for Indoor Sightseeing!

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Activity Rankings ===")

    if not rankings:
        lines.append("")
        lines.append("  (no rankings available)")
        return "\n".join(lines)

    ordered = sort_by_average_score(rankings)
    day_labels = [d.date[5:] for d in ordered[0].daily_scores]

    header = (
        f"  {'Rank':>4}  {'Activity':<20}  {'Avg':>3}  "
        + "  ".join(f"{label:>5}" for label in day_labels)
    )
    lines.append(header.rstrip())
    lines.append("  " + "-" * (len(header.rstrip()) - 2))

    for rank, ranking in enumerate(ordered, start=1):
        day_cells = "  ".join(f"{d.score:>5}" for d in ranking.daily_scores)
        lines.append(
            f"  {rank:>4}  {str(ranking.activity):<20}  {ranking.average_score:>3}  "
            f"{day_cells}".rstrip()
        )
        lines.append(f"        -> {ranking.recommendation}")

    return "\n".join(lines)
