"""Central runtime configuration for the Fluxpoint client."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    fluxpoint_api_base_url: str = "https://api.fluxpoint.dev"
    fluxpoint_api_token: str = ""
    fluxpoint_api_timeout_seconds: int = 20
    fluxpoint_connect_timeout_seconds: int = 10
    fluxpoint_max_workers: int = 4
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def _validate(settings: Settings) -> Settings:
    base_url = settings.fluxpoint_api_base_url.strip().lower()
    if not (base_url.startswith("http://") or base_url.startswith("https://")):
        raise ValueError("FLUXPOINT_API_BASE_URL must be an http(s) URL.")
    if settings.fluxpoint_api_timeout_seconds <= 0:
        raise ValueError("FLUXPOINT_API_TIMEOUT_SECONDS must be positive.")
    if settings.fluxpoint_connect_timeout_seconds <= 0:
        raise ValueError("FLUXPOINT_CONNECT_TIMEOUT_SECONDS must be positive.")
    if settings.fluxpoint_max_workers <= 0:
        raise ValueError("FLUXPOINT_MAX_WORKERS must be positive.")
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return validated settings as a cached singleton."""

    return _validate(Settings())
