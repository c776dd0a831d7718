"""
Logging setup for the Activity Forecaster.

Call ``configure_logging(config)`` once at CLI entry. Library modules only
ever use ``logging.getLogger(__name__)``.

Output goes to stderr (and optionally a file) so that ``rank --json`` keeps
stdout as pure JSON.

Forecast context
----------------
Log calls along the forecast path attach context with ``extra=``:

    location    display name being ranked
    latitude    requested / file latitude
    longitude   requested / file longitude
    days        number of weather days involved
    fixture     ``True`` when the offline fixture week was used
    source      weather file the days were read from
    output      path of a written export

Text lines end with whatever context the record carries::

    2026-10-16T15:00:00Z [INFO] activity_forecaster.pipeline.forecast: Ranking
    activities for Chamonix (7 days, fixture=True) [location=Chamonix days=7 fixture=True]

JSON lines (``json_format = true``) carry it as a ``context`` object::

    {"ts": "...", "level": "INFO", "logger": "...", "msg": "...",
     "context": {"location": "Chamonix", "days": 7, "fixture": true}}

Other ``extra=`` keys are ignored by both formatters.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from activity_forecaster.config import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

CONTEXT_FIELDS: tuple[str, ...] = (
    "location", "latitude", "longitude", "days", "fixture", "source", "output",
)

# Third-party loggers that log every request at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore")


def forecast_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return the forecast context fields present on ``record``, in display order."""
    return {key: getattr(record, key) for key in CONTEXT_FIELDS if hasattr(record, key)}


class ContextFormatter(logging.Formatter):
    """Plain-text formatter that appends ``[key=value ...]`` forecast context."""

    def __init__(self) -> None:
        super().__init__(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = forecast_context(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{line} [{pairs}]"


class JsonLineFormatter(logging.Formatter):
    """Emit one JSON object per record with a nested ``context`` object."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
                LOG_DATE_FORMAT
            ),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        context = forecast_context(record)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: "LoggingConfig", verbose: bool = False) -> None:
    """Configure the root logger from a ``LoggingConfig`` instance.

    Args:
        config:  Logging configuration section from ``AppConfig``.
        verbose: Force DEBUG regardless of ``config.level`` (``rank -v``).
    """
    level = logging.DEBUG if verbose else getattr(logging, config.level, logging.INFO)
    formatter = JsonLineFormatter() if config.json_format else ContextFormatter()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
