"""MeteoSwiss — Typed Python client for the MeteoSwiss app weather API."""

import logging

from meteoswiss._http import Fetcher, SyncTransport
from meteoswiss._logging import configure_logging
from meteoswiss.client import MeteoSwissClient, query, release
from meteoswiss.exceptions import (
    MeteoSwissAllocationError,
    MeteoSwissAPIError,
    MeteoSwissConfigError,
    MeteoSwissConnectionError,
    MeteoSwissError,
    MeteoSwissExtractionError,
    MeteoSwissInvalidArgumentError,
    MeteoSwissParseError,
    MeteoSwissTimeoutError,
    MeteoSwissTransportError,
    MeteoSwissValidationError,
)
from meteoswiss.models import CurrentWeather, ForecastEntry, WeatherGraph, WeatherReport
from meteoswiss.settings import MeteoSwissSettings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CurrentWeather",
    "Fetcher",
    "ForecastEntry",
    "MeteoSwissAPIError",
    "MeteoSwissAllocationError",
    "MeteoSwissClient",
    "MeteoSwissConfigError",
    "MeteoSwissConnectionError",
    "MeteoSwissError",
    "MeteoSwissExtractionError",
    "MeteoSwissInvalidArgumentError",
    "MeteoSwissParseError",
    "MeteoSwissSettings",
    "MeteoSwissTimeoutError",
    "MeteoSwissTransportError",
    "MeteoSwissValidationError",
    "SyncTransport",
    "WeatherGraph",
    "WeatherReport",
    "configure_logging",
    "query",
    "release",
]

__version__ = "0.1.0"
