"""
Activity Forecaster — turns a 7-day daily weather forecast into per-activity
suitability scores, weekly rankings, and plain-English recommendations.

Packages
--------
scoring    : the rule engine (pure functions, no I/O).
models     : pydantic data models for weather input and ranking output.
taxonomy   : fixed enumerations (activities, condition labels).
ingestion  : Open-Meteo client and JSON weather-file loader.
pipeline   : assembles the full forecast payload for one location.
reporting  : terminal formatters and JSON export.
"""
