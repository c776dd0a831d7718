"""
Export helpers for forecast payloads.

All functions write to disk and return the written ``Path``.

``write_forecast_json()`` emits the complete ``ActivityForecast`` with
camelCase keys (``dailyWeather``, ``averageScore``, ``dailyScores``) — the
same payload shape downstream presenters consume, and a layout
``load_weather_file()`` can read back.

``export_daily_scores_csv()`` is flat: one row per (activity, day), so it
loads directly in a spreadsheet without unpivoting.
"""

from __future__ import annotations

import csv
import json
import logging
import re
from datetime import date
from pathlib import Path

from activity_forecaster.models.forecast import ActivityForecast

logger = logging.getLogger(__name__)

DAILY_SCORE_COLUMNS: list[str] = [
    "activity", "date", "score", "conditions", "average_score", "recommendation",
]


def write_forecast_json(
    forecast: ActivityForecast,
    output_dir: Path,
    run_date: date | None = None,
    indent: int = 2,
) -> Path:
    """Write ``forecast`` as ``activity_forecast_{location}_{date}.json``.

    Args:
        forecast:   The payload to serialise.
        output_dir: Directory to write to (created if missing).
        run_date:   Date label for the filename. Defaults to today.
        indent:     JSON indentation.

    Returns:
        Path to the written file.
    """
    if run_date is None:
        run_date = date.today()

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"activity_forecast_{_slugify(forecast.location)}_{run_date}.json"

    payload = forecast.model_dump(mode="json", by_alias=True)
    path.write_text(json.dumps(payload, indent=indent, ensure_ascii=False), encoding="utf-8")
    logger.info(
        "Wrote forecast JSON: %s", path,
        extra={"location": forecast.location, "output": str(path)},
    )
    return path


def export_daily_scores_csv(forecast: ActivityForecast, path: Path) -> Path:
    """Write one CSV row per (activity, day).

    Args:
        forecast: Source payload.
        path:     Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=DAILY_SCORE_COLUMNS)
        writer.writeheader()
        for ranking in forecast.rankings:
            for day in ranking.daily_scores:
                writer.writerow(
                    {
                        "activity":       str(ranking.activity),
                        "date":           day.date,
                        "score":          day.score,
                        "conditions":     str(day.conditions),
                        "average_score":  ranking.average_score,
                        "recommendation": ranking.recommendation,
                    }
                )
    logger.info(
        "Wrote daily scores CSV: %s", path,
        extra={"location": forecast.location, "output": str(path)},
    )
    return path


def _slugify(text: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug or "location"
