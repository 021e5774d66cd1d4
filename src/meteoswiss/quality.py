"""Plausibility checks a caller may run on a fetched report.

None of these are enforced by the client; a report that fails them is still a
faithful copy of what the API returned.
"""

from __future__ import annotations

from meteoswiss.models import WeatherReport

MIN_PLAUSIBLE_TEMPERATURE = -50.0
MAX_PLAUSIBLE_TEMPERATURE = 50.0


def check_report(report: WeatherReport) -> list[str]:
    """Return a list of data-quality problems, empty if none were found."""
    problems: list[str] = []

    temperature = report.current_weather.temperature
    if not MIN_PLAUSIBLE_TEMPERATURE <= temperature <= MAX_PLAUSIBLE_TEMPERATURE:
        problems.append(f"Current temperature {temperature:.1f}°C is out of range")

    if report.forecast_count == 0:
        problems.append("No forecast data found")

    for idx, entry in enumerate(report.forecast):
        if not entry.day_date:
            problems.append(f"Forecast entry {idx} is missing a date")
        if entry.temperature_max < entry.temperature_min:
            problems.append(
                f"Forecast entry {idx} has max temp {entry.temperature_max:.1f}°C "
                f"below min temp {entry.temperature_min:.1f}°C"
            )

    return problems
