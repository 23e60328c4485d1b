"""
Application settings and environment configuration.

Responsibilities:
- Load configuration from environment variables and .env files.
- Provide defaults for optional settings.
- Expose typed settings (sheet id and range, credentials, API host/port,
  log level and format) for use across ingestion, API server and tools.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from survey_pareto.config.env import (
    DEFAULT_API_HOST,
    DEFAULT_API_PORT,
    DEFAULT_SHEET_RANGE,
    DEFAULT_SHEETS_TIMEOUT_SEC,
    env_float,
    env_int,
    env_str,
    get_private_key,
    load_pareto_env,
)


@dataclass(frozen=True)
class Settings:
    """Process-wide settings snapshot. Read once; never mutated."""

    google_sheet_id: str = ""
    google_sheet_range: str = DEFAULT_SHEET_RANGE
    service_account_email: str = ""
    private_key: str = ""
    sheets_timeout_sec: float = DEFAULT_SHEETS_TIMEOUT_SEC
    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def has_credentials(self) -> bool:
        return bool(self.service_account_email and self.private_key)


def load_settings() -> Settings:
    """Build Settings from the current environment (after loading .env)."""
    load_pareto_env()
    return Settings(
        google_sheet_id=env_str("GOOGLE_SHEET_ID"),
        google_sheet_range=env_str("GOOGLE_SHEET_RANGE", DEFAULT_SHEET_RANGE),
        service_account_email=env_str("GOOGLE_SERVICE_ACCOUNT_EMAIL"),
        private_key=get_private_key(),
        sheets_timeout_sec=env_float("SHEETS_TIMEOUT_SEC", DEFAULT_SHEETS_TIMEOUT_SEC),
        api_host=env_str("API_HOST", DEFAULT_API_HOST),
        api_port=env_int("API_PORT", DEFAULT_API_PORT),
        log_level=env_str("LOG_LEVEL", "INFO").upper(),
        log_format=env_str("LOG_FORMAT", "json").lower(),
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the current application settings (cached after first call).

    Tests that change env vars call get_settings.cache_clear() first.
    """
    return load_settings()
