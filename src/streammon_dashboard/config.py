"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    streammon_url: str
    streammon_api_key: str | None = None
    display_timezone: str = "UTC"
    all_time_window_days: int = 90
    request_timeout_seconds: float = 15
    server_ids: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_server_ids(raw: str | None) -> list[int] | None:
    """Parse a comma-separated server id filter from env."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return None
    ids: list[int] = []
    for chunk in cleaned.split(","):
        value = chunk.strip()
        if not value:
            continue
        if value.isdigit() and int(value) not in ids:
            ids.append(int(value))
    return ids or None
