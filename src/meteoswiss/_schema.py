"""Required-key validation for plzDetail responses.

The extractor skips fields it cannot convert, so this module is the only place
where an upstream schema change surfaces as an error instead of a report full of
zeros. Validation checks presence and container types only; scalar values may
have any JSON type (``null`` included), and array contents are not inspected.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, create_model

from meteoswiss.exceptions import MeteoSwissValidationError

CURRENT_WEATHER_KEYS: tuple[str, ...] = ("time", "icon", "iconV2", "temperature")

FORECAST_KEYS: tuple[str, ...] = (
    "dayDate",
    "iconDay",
    "iconDayV2",
    "temperatureMax",
    "temperatureMin",
    "precipitation",
    "precipitationMin",
    "precipitationMax",
)

GRAPH_KEYS: tuple[str, ...] = ("start", "startLowResolution")

GRAPH_SERIES_KEYS: tuple[str, ...] = (
    "precipitation10m",
    "precipitationMin10m",
    "precipitationMax10m",
    "weatherIcon3h",
    "weatherIcon3hV2",
    "windDirection3h",
    "windSpeed3h",
    "sunrise",
    "sunset",
    "temperatureMin1h",
    "temperatureMax1h",
    "temperatureMean1h",
    "precipitation1h",
    "precipitationMin1h",
    "precipitationMax1h",
    "windSpeed1h",
    "windSpeed1hq10",
    "windSpeed1hq90",
    "gustSpeed1h",
    "gustSpeed1hq10",
    "gustSpeed1hq90",
    "sunshine1h",
    "precipitationProbability3h",
)

_SCHEMA_CONFIG = ConfigDict(extra="ignore")


def _required(keys: tuple[str, ...], field_type: Any) -> dict[str, Any]:
    return {key: (field_type, ...) for key in keys}


_CurrentWeatherSchema = create_model(
    "_CurrentWeatherSchema",
    __config__=_SCHEMA_CONFIG,
    **_required(CURRENT_WEATHER_KEYS, Any),
)

_ForecastEntrySchema = create_model(
    "_ForecastEntrySchema",
    __config__=_SCHEMA_CONFIG,
    **_required(FORECAST_KEYS, Any),
)

_GraphSchema = create_model(
    "_GraphSchema",
    __config__=_SCHEMA_CONFIG,
    **_required(GRAPH_KEYS, Any),
    **_required(GRAPH_SERIES_KEYS, list[Any]),
)


class _PayloadSchema(BaseModel):
    """Top-level plzDetail response, checked in this field order."""

    model_config = _SCHEMA_CONFIG

    currentWeather: _CurrentWeatherSchema  # type: ignore[valid-type]
    forecast: list[_ForecastEntrySchema]  # type: ignore[valid-type]
    warnings: list[Any]
    warningsOverview: list[Any]
    graph: _GraphSchema  # type: ignore[valid-type]


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"Missing required key {location!r}: {first['msg']}"


def validate_payload(root: Any) -> None:
    """Check that ``root`` carries every key the extractor depends on.

    Raises:
        MeteoSwissValidationError: on the first missing key or wrong container
            type. Nothing is raised for a valid payload.
    """
    try:
        _PayloadSchema.model_validate(root)
    except ValidationError as exc:
        raise MeteoSwissValidationError(_describe(exc)) from exc
