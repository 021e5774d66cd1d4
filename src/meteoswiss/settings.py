"""Typed client settings loaded from the environment."""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from meteoswiss._http import DEFAULT_BASE_URL, DEFAULT_BUFFER_SIZE, DEFAULT_USER_AGENT
from meteoswiss.exceptions import MeteoSwissConfigError


class MeteoSwissSettings(BaseSettings):
    """Client settings from ``METEOSWISS_*`` environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_prefix="METEOSWISS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = Field(default=0, ge=0)
    buffer_size: int = Field(default=DEFAULT_BUFFER_SIZE, gt=0)
    verify_tls: bool = True
    user_agent: str = DEFAULT_USER_AGENT


def load_settings(**overrides: object) -> MeteoSwissSettings:
    """Load settings, wrapping validation failures in MeteoSwissConfigError."""
    try:
        return MeteoSwissSettings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        raise MeteoSwissConfigError(f"Invalid MeteoSwiss settings: {exc}") from exc
