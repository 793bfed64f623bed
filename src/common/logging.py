"""Shared logging helpers for the Hello World MCP server."""
from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_CONFIGURED = False


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger if it has not been configured yet.

    Records go to stderr; stdout is reserved for the stdio protocol stream.
    """

    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        logging.getLogger().setLevel(level)
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGER_CONFIGURED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger configured with the shared settings."""

    configure_logging()
    return logging.getLogger(name if name else "hello_mcp")


__all__ = ["configure_logging", "get_logger"]
