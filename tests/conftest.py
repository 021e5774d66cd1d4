"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import copy
import json
import logging
from typing import Any

import pytest

from meteoswiss._logging import LOGGER_NAME
from meteoswiss._schema import GRAPH_SERIES_KEYS

BASE_URL = "https://app-prod-ws.meteoswiss-app.ch/v1"
GENEVA_URL = f"{BASE_URL}/plzDetail?plz=120100"


SAMPLE_CURRENT_WEATHER = {
    "time": 1729339200000,
    "icon": 2,
    "iconV2": 102,
    "temperature": 12.4,
}

SAMPLE_FORECAST = [
    {
        "dayDate": "2024-10-19",
        "iconDay": 3,
        "iconDayV2": 103,
        "temperatureMax": 16.0,
        "temperatureMin": 8.0,
        "precipitation": 0.4,
        "precipitationMin": 0.0,
        "precipitationMax": 1.2,
    },
    {
        "dayDate": "2024-10-20",
        "iconDay": 14,
        "iconDayV2": 114,
        "temperatureMax": 13.0,
        "temperatureMin": 9.0,
        "precipitation": 6.1,
        "precipitationMin": 2.3,
        "precipitationMax": 11.0,
    },
    {
        "dayDate": "2024-10-21",
        "iconDay": 1,
        "iconDayV2": 101,
        "temperatureMax": 18.0,
        "temperatureMin": 7.0,
        "precipitation": 0.0,
        "precipitationMin": 0.0,
        "precipitationMax": 0.1,
    },
]

SAMPLE_GRAPH: dict[str, Any] = {
    "start": 1729296000000,
    "startLowResolution": 1729468800000,
    **{key: [] for key in GRAPH_SERIES_KEYS},
}
SAMPLE_GRAPH["precipitation10m"] = [0.0, 0.2, 1.5, 0.0]
SAMPLE_GRAPH["temperatureMean1h"] = [11.8, 12.1, 12.4]
SAMPLE_GRAPH["weatherIcon3h"] = [2, 2, 14]

SAMPLE_PAYLOAD: dict[str, Any] = {
    "currentWeather": SAMPLE_CURRENT_WEATHER,
    "forecast": SAMPLE_FORECAST,
    "warnings": [],
    "warningsOverview": [],
    "graph": SAMPLE_GRAPH,
}


def make_payload() -> dict[str, Any]:
    """Fresh deep copy of the sample payload, safe to mutate."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


def encode(payload: Any) -> bytes:
    return json.dumps(payload).encode("utf-8")


class FakeFetcher:
    """In-memory fetcher recording every call."""

    def __init__(self, body: bytes | Exception) -> None:
        self.body = body
        self.calls: list[tuple[str, int, int]] = []

    def fetch(self, url: str, capacity: int, timeout_ms: int) -> bytes:
        self.calls.append((url, capacity, timeout_ms))
        if isinstance(self.body, Exception):
            raise self.body
        return self.body[:capacity]


@pytest.fixture
def payload() -> dict[str, Any]:
    return make_payload()


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep developer environment variables and .env files out of the tests."""
    for name in ("BASE_URL", "TIMEOUT_MS", "BUFFER_SIZE", "VERIFY_TLS", "USER_AGENT"):
        monkeypatch.delenv(f"METEOSWISS_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Remove handlers installed by configure_logging during a test."""
    logger = logging.getLogger(LOGGER_NAME)
    old_handlers = logger.handlers[:]
    old_level = logger.level
    yield
    for handler in logger.handlers[:]:
        if handler not in old_handlers:
            handler.close()
            logger.removeHandler(handler)
    logger.setLevel(old_level)
