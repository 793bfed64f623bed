"""MCP stdio transport for the Hello World tools.

The SDK server owns the JSON-RPC session; every request is forwarded to the
dispatcher, which is the only place tools are looked up or executed.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

import anyio
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from common.config import AppSettings, get_settings
from common.logging import configure_logging, get_logger

from . import core
from .errors import DispatchError

LOGGER = get_logger("hello_mcp.stdio")


def tool_definitions(dispatcher: core.Dispatcher) -> List[types.Tool]:
    return [
        types.Tool(
            name=descriptor.name,
            description=descriptor.description,
            inputSchema=descriptor.input_schema.to_payload(),
        )
        for descriptor in dispatcher.list_tools()
    ]


def call_tool_contents(
    dispatcher: core.Dispatcher, name: str, arguments: Optional[Dict[str, Any]]
) -> List[types.TextContent]:
    try:
        result = dispatcher.call_tool(name, arguments or {})
    except DispatchError as exc:
        LOGGER.error("[MCP Error] %s", exc)
        raise
    return [types.TextContent(type="text", text=block.text) for block in result.content]


def build_server(
    dispatcher: Optional[core.Dispatcher] = None,
    settings: Optional[AppSettings] = None,
) -> Server:
    """Create an SDK server whose tool handlers delegate to ``dispatcher``."""

    settings = settings or get_settings()
    dispatcher = dispatcher or core.get_dispatcher()
    server = Server(name=settings.server.name, version=settings.server.version)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return tool_definitions(dispatcher)

    # Enum choices stay advisory, so the SDK must not validate input against the schema.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        return call_tool_contents(dispatcher, name, arguments)

    return server


async def serve(server: Optional[Server] = None) -> None:
    server = server or build_server()
    async with stdio_server() as (read_stream, write_stream):
        LOGGER.info("Hello World MCP server running on stdio")
        try:
            await server.run(read_stream, write_stream, server.create_initialization_options())
        except Exception:
            LOGGER.exception("[MCP Error] session terminated")
            raise


def main() -> int:
    configure_logging(get_settings().log_level)
    try:
        anyio.run(serve)
    except Exception:
        LOGGER.exception("Failed to start server")
        return 1
    return 0


__all__ = ["build_server", "call_tool_contents", "main", "serve", "tool_definitions"]
