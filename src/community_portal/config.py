"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    superuser_ids: str | None = None
    reservation_ttl_minutes: int = Field(default=30, gt=0)
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_superuser_ids(raw: str | None) -> frozenset[str]:
    """Parse comma-separated superuser member ids from env."""
    if raw is None:
        return frozenset()
    return frozenset(chunk.strip() for chunk in raw.split(",") if chunk.strip())
