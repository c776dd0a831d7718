"""
Weather ingestion: everything that produces ``DailyWeather`` records for the
scoring engine.

Modules
-------
open_meteo_client : OpenMeteoClient (live daily forecast by coordinates, plus
                    a deterministic fixture week) + parse_daily_payload().
weather_file      : read_weather_file() / load_weather_file() — JSON files on disk,
                    with any saved coordinates.
"""
