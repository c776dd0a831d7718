"""
Activity scoring engine: converts a week of daily weather into per-activity
day scores, weekly averages, and recommendation text.

Modules
-------
rules      : one pure scoring function per activity + the ACTIVITY_SCORERS
             table + round_half_up().
text       : classify_conditions() + build_recommendation().
validation : InvalidInputError + coerce_weather_days().
ranker     : rank_activities() + sort_by_average_score().

Nothing in this package performs I/O or keeps state between calls.
"""
