"""Decode a raw response body into a generic JSON tree."""

from __future__ import annotations

import json
from typing import Any

from meteoswiss.exceptions import MeteoSwissParseError


def _reject_constant(name: str) -> Any:
    """NaN and Infinity are not valid JSON."""
    raise ValueError(f"Invalid JSON constant {name!r}")


def parse_payload(raw: bytes | str) -> dict[str, Any]:
    """Parse ``raw`` as JSON and require an object at the root."""
    if not raw:
        raise MeteoSwissParseError("Empty response body")
    try:
        root = json.loads(raw, parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError, RecursionError) as exc:
        raise MeteoSwissParseError(f"Malformed JSON response: {exc}") from exc
    if not isinstance(root, dict):
        raise MeteoSwissParseError(
            f"Expected a JSON object at the root, got {type(root).__name__}"
        )
    return root
