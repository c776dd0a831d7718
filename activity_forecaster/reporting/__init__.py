"""
Reporting: turns an ``ActivityForecast`` into terminal text and files.

Modules
-------
formatters : format_week_summary() + format_rankings_table() — plain
             multi-line strings for ``typer.echo()``.
export     : write_forecast_json() + export_daily_scores_csv() — file output.
"""
