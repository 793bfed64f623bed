"""Shared helpers for the Hello World MCP server."""

from .config import (
    AppSettings,
    HTTPSettings,
    ServerSettings,
    get_settings,
    reset_settings_cache,
)
from .logging import configure_logging, get_logger

__all__ = [
    "AppSettings",
    "HTTPSettings",
    "ServerSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "reset_settings_cache",
]
