"""
Tests for activity_forecaster/utils/logging.py.

What we test
------------
ContextFormatter:   appends [key=value ...] forecast context, in field order;
                    unrelated extras and context-free records are untouched.
JsonLineFormatter:  one JSON object per record with a nested "context".
configure_logging(): file handler (parent dirs created), verbose → DEBUG,
                    httpx quietened.
Forecast path:      pipeline records actually carry location/days/fixture.
"""

from __future__ import annotations

import json
import logging
from datetime import date

import pytest

from activity_forecaster.config import AppConfig, LoggingConfig
from activity_forecaster.pipeline.forecast import forecast_for_coordinates
from activity_forecaster.utils.logging import (
    ContextFormatter,
    JsonLineFormatter,
    configure_logging,
    forecast_context,
)


def _record(msg: str = "Ranking activities", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "activity_forecaster.pipeline.forecast", logging.INFO, __file__, 1, msg, None, None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestForecastContext:
    def test_field_order_and_filtering(self):
        record = _record(fixture=True, location="Chamonix", days=7, request_id="abc")
        assert forecast_context(record) == {"location": "Chamonix", "days": 7, "fixture": True}

    def test_empty_without_context(self):
        assert forecast_context(_record()) == {}


class TestContextFormatter:
    def test_appends_context(self):
        line = ContextFormatter().format(_record(location="Chamonix", days=7, fixture=False))
        assert line.endswith("Ranking activities [location=Chamonix days=7 fixture=False]")
        assert "[INFO] activity_forecaster.pipeline.forecast:" in line

    def test_no_brackets_without_context(self):
        line = ContextFormatter().format(_record(request_id="abc"))
        assert line.endswith("Ranking activities")


class TestJsonLineFormatter:
    def test_context_object(self):
        payload = json.loads(
            JsonLineFormatter().format(_record(source="week.json", days=7, request_id="x"))
        )
        assert payload["level"] == "INFO"
        assert payload["logger"] == "activity_forecaster.pipeline.forecast"
        assert payload["msg"] == "Ranking activities"
        assert payload["context"] == {"days": 7, "source": "week.json"}
        assert "request_id" not in payload

    def test_no_context_key_without_context(self):
        payload = json.loads(JsonLineFormatter().format(_record()))
        assert "context" not in payload


class TestConfigureLogging:
    def test_file_handler_writes_context(self, tmp_path, restore_root_logger):
        log_file = tmp_path / "logs" / "run.log"
        configure_logging(LoggingConfig(level="INFO", log_file=str(log_file)))

        logging.getLogger("activity_forecaster.test").info(
            "hello", extra={"location": "Biarritz", "days": 7}
        )
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "hello [location=Biarritz days=7]" in log_file.read_text(encoding="utf-8")

    def test_json_format_selected(self, restore_root_logger):
        configure_logging(LoggingConfig(level="INFO", json_format=True))
        assert isinstance(restore_root_logger.handlers[0].formatter, JsonLineFormatter)

    def test_level_from_config(self, restore_root_logger):
        configure_logging(LoggingConfig(level="WARNING"))
        assert restore_root_logger.level == logging.WARNING

    def test_verbose_forces_debug(self, restore_root_logger):
        configure_logging(LoggingConfig(level="WARNING"), verbose=True)
        assert restore_root_logger.level == logging.DEBUG
        assert restore_root_logger.handlers[0].level == logging.DEBUG

    def test_httpx_quietened(self, restore_root_logger):
        configure_logging(LoggingConfig(level="DEBUG"))
        assert logging.getLogger("httpx").level == logging.WARNING


class TestForecastPathRecords:
    def test_pipeline_record_carries_context(self, caplog):
        with caplog.at_level(logging.INFO, logger="activity_forecaster.pipeline.forecast"):
            forecast_for_coordinates(
                AppConfig(), 45.92, 6.87,
                location="Chamonix", use_fixture=True, start_date=date(2026, 1, 12),
            )
        (record,) = [r for r in caplog.records if r.name == "activity_forecaster.pipeline.forecast"]
        assert forecast_context(record) == {"location": "Chamonix", "days": 7, "fixture": True}
