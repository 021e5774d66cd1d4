"""Query call logging for the MeteoSwiss client."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "meteoswiss"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

_api_logger = logging.getLogger(f"{LOGGER_NAME}.api")


def configure_logging(
    level: int = logging.INFO,
    log_file: str | None = None,
) -> logging.Logger:
    """Attach a console or file handler to the package logger.

    Calling it again replaces the handler installed by the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for existing in logger.handlers[:]:
        if getattr(existing, "_meteoswiss_owned", False):
            existing.close()
            logger.removeHandler(existing)

    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._meteoswiss_owned = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger


def log_api_call(fn: F) -> F:
    """Decorator that logs query calls, their outcome and duration."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # Skip 'self'
        arg_parts = [repr(a) for a in args[1:]]
        arg_parts += [f"{k}={v!r}" for k, v in kwargs.items()]
        arg_str = ", ".join(arg_parts)
        _api_logger.info("CALL: %s(%s)", fn.__qualname__, arg_str)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            _api_logger.error(
                "FAIL: %s(%s) -> %s: %s (%.3fs)",
                fn.__qualname__, arg_str, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        count = getattr(result, "forecast_count", 1)
        _api_logger.info(
            "OK: %s(%s) -> %d forecast days (%.3fs)",
            fn.__qualname__, arg_str, count, elapsed,
        )
        return result

    return wrapper  # type: ignore[return-value]
