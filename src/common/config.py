"""Application configuration management using Pydantic settings."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    """Identity advertised to MCP clients during initialization."""

    name: str = Field(
        default="Hello World Server",
        description="Server name reported in the initialize handshake.",
    )
    version: str = Field(
        default="1.0.0",
        description="Server version reported in the initialize handshake.",
    )


class HTTPSettings(BaseModel):
    """Bind address for the HTTP adapter."""

    host: str = Field(
        default="127.0.0.1",
        description="Interface the HTTP adapter listens on.",
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="TCP port the HTTP adapter listens on.",
    )


class AppSettings(BaseSettings):
    """Top-level application settings container."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="HELLO_MCP_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    server: ServerSettings = Field(default_factory=ServerSettings)
    http: HTTPSettings = Field(default_factory=HTTPSettings)
    log_level: str = Field(
        default="INFO",
        description="Root logging level name.",
    )
    timezone: Optional[str] = Field(
        default=None,
        description="IANA time zone used by get_time. Local time when unset.",
    )
    strict_enums: bool = Field(
        default=False,
        description="Reject argument values outside a property's declared enum.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().upper()
            if value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
                raise ValueError(f"Unsupported log level '{value}'")
        return value

    @field_validator("timezone", mode="before")
    @classmethod
    def _validate_timezone(cls, value: object) -> object:
        """Treat blank values as unset and reject unknown zone names early."""

        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            try:
                ZoneInfo(value)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ValueError(f"Unknown time zone '{value}'") from exc
        return value


@lru_cache
def get_settings() -> AppSettings:
    """Return the cached application settings instance."""

    return AppSettings()


def reset_settings_cache() -> None:
    """Clear the cached settings so future calls reflect new environment values."""

    get_settings.cache_clear()


__all__ = [
    "ServerSettings",
    "HTTPSettings",
    "AppSettings",
    "get_settings",
    "reset_settings_cache",
]
