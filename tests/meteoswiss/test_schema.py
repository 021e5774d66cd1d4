"""Tests for required-key validation."""

from __future__ import annotations

from typing import Any

import pytest

from meteoswiss._schema import (
    CURRENT_WEATHER_KEYS,
    FORECAST_KEYS,
    GRAPH_KEYS,
    GRAPH_SERIES_KEYS,
    validate_payload,
)
from meteoswiss.exceptions import MeteoSwissValidationError


class TestValidatePayload:
    def test_valid_payload(self, payload: dict[str, Any]) -> None:
        validate_payload(payload)

    def test_idempotent(self, payload: dict[str, Any]) -> None:
        validate_payload(payload)
        validate_payload(payload)

    def test_failure_is_repeatable(self, payload: dict[str, Any]) -> None:
        del payload["warnings"]
        messages = []
        for _ in range(2):
            with pytest.raises(MeteoSwissValidationError) as exc_info:
                validate_payload(payload)
            messages.append(str(exc_info.value))
        assert messages[0] == messages[1]

    def test_does_not_modify_payload(self, payload: dict[str, Any]) -> None:
        payload["extra"] = {"ignored": True}
        before = repr(payload)
        validate_payload(payload)
        assert repr(payload) == before

    @pytest.mark.parametrize("root", [None, [], "text", 42])
    def test_root_not_object(self, root: Any) -> None:
        with pytest.raises(MeteoSwissValidationError):
            validate_payload(root)

    @pytest.mark.parametrize(
        "key", ["currentWeather", "forecast", "warnings", "warningsOverview", "graph"]
    )
    def test_missing_top_level_key(self, payload: dict[str, Any], key: str) -> None:
        del payload[key]
        with pytest.raises(MeteoSwissValidationError, match=key):
            validate_payload(payload)

    @pytest.mark.parametrize("key", ["forecast", "warnings", "warningsOverview"])
    def test_top_level_array_wrong_type(self, payload: dict[str, Any], key: str) -> None:
        payload[key] = {}
        with pytest.raises(MeteoSwissValidationError):
            validate_payload(payload)

    @pytest.mark.parametrize("key", ["currentWeather", "graph"])
    def test_top_level_object_wrong_type(self, payload: dict[str, Any], key: str) -> None:
        payload[key] = []
        with pytest.raises(MeteoSwissValidationError):
            validate_payload(payload)

    @pytest.mark.parametrize("key", CURRENT_WEATHER_KEYS)
    def test_missing_current_weather_key(self, payload: dict[str, Any], key: str) -> None:
        del payload["currentWeather"][key]
        with pytest.raises(MeteoSwissValidationError, match=key):
            validate_payload(payload)

    def test_null_scalar_counts_as_present(self, payload: dict[str, Any]) -> None:
        payload["currentWeather"]["temperature"] = None
        payload["graph"]["start"] = None
        validate_payload(payload)

    def test_scalar_type_not_checked(self, payload: dict[str, Any]) -> None:
        payload["currentWeather"]["icon"] = "sunny"
        payload["forecast"][0]["temperatureMax"] = "warm"
        validate_payload(payload)

    @pytest.mark.parametrize("key", FORECAST_KEYS)
    def test_missing_forecast_key(self, payload: dict[str, Any], key: str) -> None:
        del payload["forecast"][1][key]
        with pytest.raises(MeteoSwissValidationError, match=f"forecast.1.{key}"):
            validate_payload(payload)

    def test_forecast_element_not_object(self, payload: dict[str, Any]) -> None:
        payload["forecast"].append(5)
        with pytest.raises(MeteoSwissValidationError):
            validate_payload(payload)

    def test_empty_forecast_is_valid(self, payload: dict[str, Any]) -> None:
        payload["forecast"] = []
        validate_payload(payload)

    def test_warning_contents_not_checked(self, payload: dict[str, Any]) -> None:
        payload["warnings"] = [1, "two", {"three": 3}]
        payload["warningsOverview"] = [None]
        validate_payload(payload)

    @pytest.mark.parametrize("key", GRAPH_KEYS)
    def test_missing_graph_key(self, payload: dict[str, Any], key: str) -> None:
        del payload["graph"][key]
        with pytest.raises(MeteoSwissValidationError, match=key):
            validate_payload(payload)

    def test_all_graph_series_required(self) -> None:
        assert len(GRAPH_SERIES_KEYS) == 23
        assert "precipitation10m" in GRAPH_SERIES_KEYS

    @pytest.mark.parametrize("key", GRAPH_SERIES_KEYS)
    def test_missing_graph_series(self, payload: dict[str, Any], key: str) -> None:
        del payload["graph"][key]
        with pytest.raises(MeteoSwissValidationError, match=key):
            validate_payload(payload)

    @pytest.mark.parametrize("value", [None, 0, "[]", {}])
    def test_graph_series_not_array(self, payload: dict[str, Any], value: Any) -> None:
        payload["graph"]["sunshine1h"] = value
        with pytest.raises(MeteoSwissValidationError, match="sunshine1h"):
            validate_payload(payload)

    def test_graph_series_contents_not_checked(self, payload: dict[str, Any]) -> None:
        payload["graph"]["windDirection3h"] = ["N", None, {"deg": 180}]
        validate_payload(payload)

    def test_error_chains_pydantic_error(self, payload: dict[str, Any]) -> None:
        del payload["graph"]
        with pytest.raises(MeteoSwissValidationError) as exc_info:
            validate_payload(payload)
        assert exc_info.value.__cause__ is not None
        assert not exc_info.value.retryable
