"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from meteoswiss.exceptions import (
    MeteoSwissAPIError,
    MeteoSwissConnectionError,
    MeteoSwissInvalidArgumentError,
    MeteoSwissTimeoutError,
    MeteoSwissTransportError,
)

DEFAULT_BASE_URL = "https://app-prod-ws.meteoswiss-app.ch/v1"
DEFAULT_BUFFER_SIZE = 16384
DEFAULT_USER_AGENT = "meteoswiss-python/0.1.0"

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Anything that can GET a URL into a bounded buffer."""

    def fetch(self, url: str, capacity: int, timeout_ms: int) -> bytes:
        """Return at most ``capacity`` bytes of the response body."""
        ...


def _timeout(timeout_ms: int) -> httpx.Timeout:
    """Translate a millisecond timeout, where 0 means wait forever."""
    if timeout_ms == 0:
        return httpx.Timeout(None)
    return httpx.Timeout(timeout_ms / 1000.0)


def _read_bounded(response: httpx.Response, capacity: int) -> bytes:
    """Read the body into a buffer of ``capacity`` bytes, dropping the rest."""
    buffer = bytearray()
    for chunk in response.iter_bytes():
        remaining = capacity - len(buffer)
        if len(chunk) > remaining:
            buffer.extend(chunk[:remaining])
            logger.warning(
                "Response from %s truncated at %d bytes", response.url, capacity
            )
            break
        buffer.extend(chunk)
    return bytes(buffer)


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client.

    Capacity and timeout are passed on every call, so one transport can serve
    any number of queries without sharing per-request state.
    """

    def __init__(
        self,
        verify: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._client = httpx.Client(
            verify=verify,
            headers={"Accept": "application/json", "User-Agent": user_agent},
        )

    def fetch(self, url: str, capacity: int, timeout_ms: int) -> bytes:
        """Perform a GET request and return the (possibly truncated) body."""
        if capacity <= 0:
            raise MeteoSwissInvalidArgumentError(
                f"Response capacity must be positive, got {capacity}"
            )
        try:
            with self._client.stream("GET", url, timeout=_timeout(timeout_ms)) as response:
                if response.status_code >= 400:
                    response.read()
                    raise MeteoSwissAPIError(
                        status_code=response.status_code,
                        message=response.text,
                    )
                return _read_bounded(response, capacity)
        except httpx.ConnectError as exc:
            raise MeteoSwissConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise MeteoSwissTimeoutError(str(exc)) from exc
        except httpx.HTTPError as exc:
            raise MeteoSwissTransportError(str(exc)) from exc

    def close(self) -> None:
        self._client.close()
