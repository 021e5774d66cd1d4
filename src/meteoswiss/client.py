"""Public client for the MeteoSwiss plzDetail endpoint."""

from __future__ import annotations

import logging

import httpx

from meteoswiss._extract import extract_report
from meteoswiss._http import Fetcher, SyncTransport
from meteoswiss._logging import log_api_call
from meteoswiss._parse import parse_payload
from meteoswiss._schema import validate_payload
from meteoswiss.exceptions import MeteoSwissInvalidArgumentError
from meteoswiss.models import WeatherReport
from meteoswiss.settings import MeteoSwissSettings, load_settings

logger = logging.getLogger(__name__)

MAX_POSTAL_CODE = 9999


def build_url(base_url: str, postal_code: int) -> str:
    """Endpoint URL for ``postal_code``, e.g. 1201 -> ``plz=120100``."""
    if isinstance(postal_code, bool) or not isinstance(postal_code, int):
        raise MeteoSwissInvalidArgumentError(
            f"Postal code must be an integer, got {postal_code!r}"
        )
    if not 0 <= postal_code <= MAX_POSTAL_CODE:
        raise MeteoSwissInvalidArgumentError(
            f"Postal code must be between 0 and {MAX_POSTAL_CODE}, got {postal_code}"
        )
    url = httpx.URL(f"{base_url.rstrip('/')}/plzDetail", params={"plz": f"{postal_code:04d}00"})
    return str(url)


class MeteoSwissClient:
    """Synchronous client for the MeteoSwiss app API.

    Usage:
        client = MeteoSwissClient()
        report = client.query(1201)
        client.close()

        # Or as a context manager:
        with MeteoSwissClient(timeout_ms=5000) as client:
            report = client.query(8001)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout_ms: int | None = None,
        buffer_size: int | None = None,
        fetcher: Fetcher | None = None,
        settings: MeteoSwissSettings | None = None,
    ) -> None:
        overrides = {
            key: value
            for key, value in (
                ("base_url", base_url),
                ("timeout_ms", timeout_ms),
                ("buffer_size", buffer_size),
            )
            if value is not None
        }
        if settings is None:
            settings = load_settings(**overrides)
        elif overrides:
            settings = load_settings(**(settings.model_dump() | overrides))
        self.settings = settings

        self._owns_fetcher = fetcher is None
        if fetcher is None:
            fetcher = SyncTransport(
                verify=settings.verify_tls,
                user_agent=settings.user_agent,
            )
        self._fetcher = fetcher

    def __enter__(self) -> MeteoSwissClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection if this client opened it."""
        if self._owns_fetcher and isinstance(self._fetcher, SyncTransport):
            self._fetcher.close()

    @log_api_call
    def query(self, postal_code: int, timeout_ms: int | None = None) -> WeatherReport:
        """Fetch, validate and extract the report for a 4-digit postal code.

        Args:
            postal_code: Swiss postal code, e.g. 1201 for Geneva.
            timeout_ms: Request timeout in milliseconds; 0 waits forever.
                Defaults to the configured ``timeout_ms``.

        Returns:
            A fully populated WeatherReport. Call ``release()`` when done.

        Raises:
            MeteoSwissInvalidArgumentError: bad postal code or timeout.
            MeteoSwissTransportError: the request failed or timed out.
            MeteoSwissParseError: the body is not a JSON object.
            MeteoSwissValidationError: a required key is missing.
            MeteoSwissExtractionError: a section is malformed.
            MeteoSwissAllocationError: a sequence could not be allocated.
        """
        if timeout_ms is None:
            timeout_ms = self.settings.timeout_ms
        if timeout_ms < 0:
            raise MeteoSwissInvalidArgumentError(
                f"Timeout must be >= 0 milliseconds, got {timeout_ms}"
            )
        url = build_url(self.settings.base_url, postal_code)

        raw = self._fetcher.fetch(url, self.settings.buffer_size, timeout_ms)
        logger.debug("Fetched %d bytes from %s", len(raw), url)

        root = parse_payload(raw)
        validate_payload(root)
        return extract_report(root)


def query(postal_code: int, timeout_ms: int = 0) -> WeatherReport:
    """Run a single query on a short-lived client."""
    with MeteoSwissClient(timeout_ms=timeout_ms) as client:
        return client.query(postal_code)


def release(report: WeatherReport | None) -> None:
    """Free the sequences owned by ``report``. Accepts None and released reports."""
    if report is not None:
        report.release()
