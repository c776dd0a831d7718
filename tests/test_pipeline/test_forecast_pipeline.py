"""
Tests for activity_forecaster/pipeline/forecast.py.

What we test
------------
build_activity_forecast():  wraps rankings with location + weather.
forecast_for_coordinates(): fixture mode skips the network; live mode uses
                            the supplied client; default display name.
forecast_from_file():       location and coordinates come from arguments, then
                            the file, then the stem and 0.0, 0.0.
summarize_week():           fixture-week statistics, rainy/snow day counts,
                            wind, sky and rain descriptions; empty input raises.
"""

from __future__ import annotations

import json
from datetime import date

import httpx
import pytest

from activity_forecaster.config import AppConfig
from activity_forecaster.ingestion.open_meteo_client import OpenMeteoClient
from activity_forecaster.pipeline.forecast import (
    build_activity_forecast,
    forecast_for_coordinates,
    forecast_from_file,
    summarize_week,
)
from activity_forecaster.scoring.validation import InvalidInputError
from activity_forecaster.taxonomy.activity_taxonomy import Activity


class TestBuildActivityForecast:
    def test_wraps_rankings(self, fixture_week):
        fc = build_activity_forecast(fixture_week, "Chamonix", 45.92, 6.87)
        assert fc.location == "Chamonix"
        assert fc.daily_weather == fixture_week
        assert [r.activity for r in fc.rankings] == list(Activity)

    def test_empty_days_raise(self):
        with pytest.raises(InvalidInputError):
            build_activity_forecast([], "Nowhere", 0.0, 0.0)


class TestForecastForCoordinates:
    def test_fixture_mode_never_calls_http(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("fixture mode must not hit the network")

        client = OpenMeteoClient(http_client=httpx.Client(transport=httpx.MockTransport(handler)))
        fc = forecast_for_coordinates(
            AppConfig(), 45.92, 6.87,
            location="Chamonix", use_fixture=True, client=client,
            start_date=date(2026, 1, 12),
        )
        assert fc.location == "Chamonix"
        assert fc.daily_weather[0].date == "2026-01-12"
        assert len(fc.rankings) == 4

    def test_live_mode_uses_client(self, fixture_week):
        daily = {
            "time": [d.date for d in fixture_week],
            "temperature_2m_max": [d.max_temp for d in fixture_week],
            "temperature_2m_min": [d.min_temp for d in fixture_week],
            "precipitation_sum": [d.precipitation for d in fixture_week],
            "windspeed_10m_max": [d.wind_speed for d in fixture_week],
            "snowfall_sum": [d.snowfall for d in fixture_week],
            "cloudcover_mean": [d.cloud_cover for d in fixture_week],
        }
        client = OpenMeteoClient(
            http_client=httpx.Client(
                transport=httpx.MockTransport(
                    lambda request: httpx.Response(200, json={"daily": daily})
                )
            )
        )
        fc = forecast_for_coordinates(AppConfig(), 45.92, 6.87, client=client)
        assert fc.daily_weather == fixture_week
        assert fc.location == "45.92, 6.87"


class TestForecastFromFile:
    def test_location_defaults_to_stem(self, tmp_path, fixture_week):
        path = tmp_path / "biarritz.json"
        path.write_text(
            json.dumps([d.model_dump(by_alias=True) for d in fixture_week]),
            encoding="utf-8",
        )
        fc = forecast_from_file(path)
        assert fc.location == "biarritz"
        assert len(fc.daily_weather) == 7

    def test_bare_day_list_falls_back_to_origin(self, tmp_path, fixture_week):
        path = tmp_path / "week.json"
        path.write_text(
            json.dumps([d.model_dump(by_alias=True) for d in fixture_week]),
            encoding="utf-8",
        )
        fc = forecast_from_file(path)
        assert (fc.latitude, fc.longitude) == (0.0, 0.0)

    def test_saved_forecast_keeps_location_and_coordinates(self, tmp_path, fixture_week):
        saved = build_activity_forecast(fixture_week, "Chamonix", 45.92, 6.87)
        path = tmp_path / "saved.json"
        path.write_text(json.dumps(saved.model_dump(mode="json", by_alias=True)), encoding="utf-8")

        fc = forecast_from_file(path)
        assert fc.location == "Chamonix"
        assert (fc.latitude, fc.longitude) == (45.92, 6.87)
        assert fc.rankings == saved.rankings

    def test_open_meteo_response_coordinates(self, tmp_path, fixture_week):
        payload = {
            "latitude": 43.48,
            "longitude": -1.56,
            "daily": {
                "time": [d.date for d in fixture_week],
                "temperature_2m_max": [d.max_temp for d in fixture_week],
                "temperature_2m_min": [d.min_temp for d in fixture_week],
                "precipitation_sum": [d.precipitation for d in fixture_week],
                "windspeed_10m_max": [d.wind_speed for d in fixture_week],
                "snowfall_sum": [d.snowfall for d in fixture_week],
                "cloudcover_mean": [d.cloud_cover for d in fixture_week],
            },
        }
        path = tmp_path / "biarritz.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        fc = forecast_from_file(path)
        assert fc.location == "biarritz"
        assert (fc.latitude, fc.longitude) == (43.48, -1.56)

    def test_explicit_arguments_win(self, tmp_path, fixture_week):
        saved = build_activity_forecast(fixture_week, "Chamonix", 45.92, 6.87)
        path = tmp_path / "saved.json"
        path.write_text(json.dumps(saved.model_dump(mode="json", by_alias=True)), encoding="utf-8")

        fc = forecast_from_file(path, location="Argentiere", latitude=45.98, longitude=6.93)
        assert fc.location == "Argentiere"
        assert (fc.latitude, fc.longitude) == (45.98, 6.93)


class TestSummarizeWeek:
    def test_fixture_week(self, fixture_week):
        s = summarize_week(fixture_week)
        assert s.start_date == "2026-01-12"
        assert s.end_date == "2026-01-18"
        assert s.days == 7
        assert s.avg_max_temp == pytest.approx(10.0)
        assert s.avg_min_temp == pytest.approx(1.5)
        assert s.lowest_temp == pytest.approx(-9.0)
        assert s.highest_temp == pytest.approx(23.0)
        assert s.total_precipitation == pytest.approx(24.7)
        assert s.rainy_days == 4          # 4.0, 1.2, 7.5, 12.0 mm
        assert s.total_snowfall == pytest.approx(18.0)
        assert s.snow_days == 2
        assert s.avg_wind_speed == pytest.approx(27.1)   # 190 / 7
        assert s.avg_cloud_cover == pytest.approx(59.3)

    def test_fixture_week_descriptions(self, fixture_week):
        s = summarize_week(fixture_week)
        assert s.precipitation_outlook == "Some rain expected"
        assert s.wind_description == "Moderate"
        assert s.sky_description == "Partly cloudy"

    def test_one_mm_is_not_a_rainy_day(self, make_day):
        s = summarize_week([make_day(precipitation=1.0), make_day(precipitation=1.1)])
        assert s.rainy_days == 1

    def test_dry_calm_clear_week(self, make_day):
        s = summarize_week([make_day(wind_speed=14.9, cloud_cover=29.9)] * 3)
        assert s.rainy_days == 0
        assert s.precipitation_outlook == "Dry week!"
        assert s.wind_description == "Calm"
        assert s.sky_description == "Mostly clear"
        assert s.snow_days == 0

    def test_very_wet_stormy_overcast_week(self, make_day):
        s = summarize_week([make_day(precipitation=3.0, wind_speed=30.0, cloud_cover=70.0)] * 5)
        assert s.precipitation_outlook == "Very wet"
        assert s.wind_description == "Strong"
        assert s.sky_description == "Mostly cloudy"

    def test_four_rainy_days_is_not_very_wet(self, make_day):
        days = [make_day(precipitation=2.0)] * 4 + [make_day()] * 3
        assert summarize_week(days).precipitation_outlook == "Some rain expected"

    def test_empty_raises(self):
        with pytest.raises(InvalidInputError):
            summarize_week([])
