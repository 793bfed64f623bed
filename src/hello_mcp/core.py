"""Core dispatch helpers for the Hello World MCP tools."""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Tuple

from common.config import AppSettings, get_settings
from common.logging import get_logger

from .catalog import ToolDescriptor, list_tools as catalog_tools
from .errors import (
    DispatchError,
    InvalidChoiceError,
    MissingArgumentError,
    ToolNotFoundError,
    ValidationFailure,
)
from .registry import TOOL_REGISTRY, Clock, ToolContext, ToolHandler
from .resolver import resolve
from .schemas import InvocationResult
from .tools.get_time import system_clock

LOGGER = get_logger("hello_mcp.core")

ToolResponse = Dict[str, Any]


class Dispatcher:
    """Route invocations by tool name and wrap results in the response envelope.

    A dispatcher holds no per-call state; the same instance serves every
    request for the life of the process.
    """

    def __init__(
        self,
        *,
        registry: Optional[Mapping[str, ToolHandler]] = None,
        clock: Optional[Clock] = None,
        strict_enums: Optional[bool] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        settings = settings or get_settings()
        self._registry = TOOL_REGISTRY if registry is None else registry
        self._strict_enums = settings.strict_enums if strict_enums is None else strict_enums
        self._context = ToolContext(clock=clock or system_clock(settings.timezone))

    def list_tools(self) -> Tuple[ToolDescriptor, ...]:
        return catalog_tools()

    def list_tools_payload(self) -> Dict[str, Any]:
        return {"tools": [descriptor.to_payload() for descriptor in self.list_tools()]}

    def call_tool(
        self, tool_name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> InvocationResult:
        """Execute ``tool_name`` and return its single text content block.

        Raises :class:`ToolNotFoundError` for unknown names and a
        :class:`ValidationFailure` subclass when arguments do not resolve; the
        handler does not run in either case.
        """

        handler = self._registry.get(tool_name)
        if handler is None:
            LOGGER.warning("Rejected call to unknown tool %r", tool_name)
            raise ToolNotFoundError(tool_name)

        try:
            resolved = resolve(handler.descriptor, arguments, strict_enums=self._strict_enums)
        except ValidationFailure as exc:
            LOGGER.warning("Invalid arguments for %s: %s", tool_name, exc)
            raise

        LOGGER.debug("Calling %s with %s", handler.name, resolved)
        return InvocationResult.from_text(handler(resolved, self._context))

    def run_tool(
        self, tool_name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> ToolResponse:
        """Execute a tool and return a status-tagged response mapping."""

        try:
            result = self.call_tool(tool_name, arguments)
        except ToolNotFoundError as exc:
            return {"status": "error", "error": exc.to_dict()}
        except DispatchError as exc:
            return {"status": "error", "tool": tool_name, "error": exc.to_dict()}
        except Exception as exc:
            LOGGER.exception("Tool %s failed", tool_name)
            return {
                "status": "error",
                "tool": tool_name,
                "error": {
                    "type": exc.__class__.__name__,
                    "message": str(exc) or repr(exc),
                },
            }

        return {
            "status": "success",
            "tool": tool_name,
            "result": result.model_dump(),
        }


@lru_cache
def get_dispatcher() -> Dispatcher:
    """Return the process-wide dispatcher built from the cached settings."""

    return Dispatcher()


def list_tools() -> Dict[str, Any]:
    return get_dispatcher().list_tools_payload()


def call_tool(tool_name: str, arguments: Optional[Mapping[str, Any]] = None) -> InvocationResult:
    return get_dispatcher().call_tool(tool_name, arguments)


def run_tool(tool_name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResponse:
    return get_dispatcher().run_tool(tool_name, arguments)


__all__ = [
    "DispatchError",
    "Dispatcher",
    "InvalidChoiceError",
    "MissingArgumentError",
    "ToolNotFoundError",
    "ToolResponse",
    "ValidationFailure",
    "call_tool",
    "get_dispatcher",
    "list_tools",
    "run_tool",
]
