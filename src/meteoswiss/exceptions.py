"""Custom exceptions for the MeteoSwiss client."""

from __future__ import annotations


class MeteoSwissError(Exception):
    """Base exception for all MeteoSwiss client errors."""

    retryable: bool = False


class MeteoSwissConfigError(MeteoSwissError):
    """Raised when client settings are invalid."""


class MeteoSwissInvalidArgumentError(MeteoSwissError, ValueError):
    """Raised when a query is called with an unusable postal code or timeout."""


class MeteoSwissTransportError(MeteoSwissError):
    """Raised when the weather data could not be fetched."""

    retryable = True


class MeteoSwissConnectionError(MeteoSwissTransportError):
    """Raised when the client cannot connect to the API."""


class MeteoSwissTimeoutError(MeteoSwissTransportError):
    """Raised when a request to the API times out."""


class MeteoSwissAPIError(MeteoSwissTransportError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class MeteoSwissParseError(MeteoSwissError):
    """Raised when the response body is not a JSON object."""


class MeteoSwissValidationError(MeteoSwissError):
    """Raised when a required key is missing or has the wrong container type."""


class MeteoSwissAllocationError(MeteoSwissError):
    """Raised when a forecast or graph sequence cannot be allocated."""


class MeteoSwissExtractionError(MeteoSwissError):
    """Raised when a top-level section is absent or malformed at extraction time."""
