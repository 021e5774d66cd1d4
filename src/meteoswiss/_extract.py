"""Map a validated plzDetail tree onto report models.

Field conversion is lenient: a value of the wrong JSON type leaves the field at
its zero default and extraction moves on. Only a missing or malformed top-level
section, or a failed sequence allocation, aborts the whole report.
"""

from __future__ import annotations

from typing import Any

from meteoswiss.exceptions import MeteoSwissAllocationError, MeteoSwissExtractionError
from meteoswiss.models import (
    DAY_DATE_CAPACITY,
    CurrentWeather,
    ForecastEntry,
    WeatherGraph,
    WeatherReport,
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_int(value: Any) -> int | None:
    """Numeric value truncated toward zero."""
    if not _is_number(value):
        return None
    try:
        return int(value)
    except (OverflowError, ValueError):  # inf / nan
        return None


def _as_float(value: Any) -> float | None:
    if not _is_number(value):
        return None
    try:
        return float(value)
    except OverflowError:
        return None


def _as_text(value: Any, capacity: int) -> str | None:
    """String value cut to fit ``capacity`` including the terminator."""
    if not isinstance(value, str):
        return None
    return value[: capacity - 1]


def _as_float_series(value: Any) -> list[float] | None:
    if not isinstance(value, list):
        return None
    count = len(value)
    try:
        series = [0.0] * count
    except MemoryError as exc:
        raise MeteoSwissAllocationError(
            f"Could not allocate a series of {count} values"
        ) from exc
    for idx, element in enumerate(value):
        number = _as_float(element)
        if number is not None:
            series[idx] = number
    return series


def _pick(source: dict[str, Any], fields: dict[str, tuple[str, Any]]) -> dict[str, Any]:
    """Convert ``source[json_key]`` for each model field, skipping failures."""
    values: dict[str, Any] = {}
    for field_name, (json_key, convert) in fields.items():
        if json_key not in source:
            continue
        converted = convert(source[json_key])
        if converted is not None:
            values[field_name] = converted
    return values


_CURRENT_WEATHER_FIELDS: dict[str, tuple[str, Any]] = {
    "time": ("time", _as_int),
    "icon": ("icon", _as_int),
    "icon_v2": ("iconV2", _as_int),
    "temperature": ("temperature", _as_float),
}

_FORECAST_FIELDS: dict[str, tuple[str, Any]] = {
    "day_date": ("dayDate", lambda v: _as_text(v, DAY_DATE_CAPACITY)),
    "icon_day": ("iconDay", _as_int),
    "icon_day_v2": ("iconDayV2", _as_int),
    "temperature_max": ("temperatureMax", _as_float),
    "temperature_min": ("temperatureMin", _as_float),
    "precipitation": ("precipitation", _as_float),
    "precipitation_min": ("precipitationMin", _as_float),
    "precipitation_max": ("precipitationMax", _as_float),
}

_GRAPH_FIELDS: dict[str, tuple[str, Any]] = {
    "start": ("start", _as_int),
    "start_low_resolution": ("startLowResolution", _as_int),
    "precipitation10m": ("precipitation10m", _as_float_series),
}


def extract_current_weather(section: dict[str, Any]) -> CurrentWeather:
    return CurrentWeather(**_pick(section, _CURRENT_WEATHER_FIELDS))


def extract_forecast(section: list[Any]) -> list[ForecastEntry]:
    """One entry per array element; non-object elements become zero entries."""
    count = len(section)
    try:
        forecast = [ForecastEntry()] * count
    except MemoryError as exc:
        raise MeteoSwissAllocationError(
            f"Could not allocate {count} forecast entries"
        ) from exc
    for idx, element in enumerate(section):
        if isinstance(element, dict):
            forecast[idx] = ForecastEntry(**_pick(element, _FORECAST_FIELDS))
    return forecast


def extract_graph(section: dict[str, Any]) -> WeatherGraph:
    return WeatherGraph(**_pick(section, _GRAPH_FIELDS))


def _section(root: dict[str, Any], key: str, expected: type) -> Any:
    value = root.get(key)
    if value is None:
        raise MeteoSwissExtractionError(f"Section {key!r} is missing")
    if not isinstance(value, expected):
        raise MeteoSwissExtractionError(
            f"Section {key!r} should be {expected.__name__}, got {type(value).__name__}"
        )
    return value


def extract_report(root: dict[str, Any]) -> WeatherReport:
    """Build a report from ``currentWeather``, ``forecast`` and ``graph``, in that order.

    Raises:
        MeteoSwissExtractionError: if a section is absent or of the wrong type.
        MeteoSwissAllocationError: if a sequence could not be allocated.
    """
    report = WeatherReport()
    try:
        report.current_weather = extract_current_weather(
            _section(root, "currentWeather", dict)
        )
        report.forecast = extract_forecast(_section(root, "forecast", list))
        report.graph = extract_graph(_section(root, "graph", dict))
    except (MeteoSwissExtractionError, MeteoSwissAllocationError):
        report.release()
        raise
    return report
