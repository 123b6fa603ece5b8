"""Application configuration loaded from environment variables."""

from __future__ import annotations

import pendulum
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PERMALINK_FORMAT = "%year%/%monthnum%/%day%/%postname%"


class Settings(BaseSettings):
    """Permalinker application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    debug: bool = False
    expose_docs: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///data/db/permalinker.db"

    # Server
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    trusted_hosts: list[str] = Field(default_factory=list)

    # Permalinks (fallbacks for values missing from the options table)
    permalink_enabled: bool = True
    permalink_format: str = DEFAULT_PERMALINK_FORMAT
    timezone: str = "UTC"

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        try:
            pendulum.timezone(v)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: {v}") from exc
        return v
