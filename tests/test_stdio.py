"""Tests for the MCP stdio adapter."""
from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import logging
from contextlib import asynccontextmanager

import anyio
import mcp.types as types
import pytest

from common.config import AppSettings, ServerSettings
from hello_mcp import core, stdio
from hello_mcp.errors import ToolNotFoundError


@pytest.fixture
def dispatcher() -> core.Dispatcher:
    return core.Dispatcher(clock=lambda: datetime(2024, 5, 1, 8, 0, 0), settings=AppSettings())


def test_tool_definitions_mirror_catalog(dispatcher):
    tools = stdio.tool_definitions(dispatcher)

    assert [tool.name for tool in tools] == ["say_hello", "get_time"]
    assert tools[0].inputSchema["properties"]["language"]["default"] == "japanese"
    assert tools[1].description == "現在の時刻を返します"


def test_call_tool_contents(dispatcher):
    contents = stdio.call_tool_contents(dispatcher, "get_time", {"format": "12h"})

    assert len(contents) == 1
    assert isinstance(contents[0], types.TextContent)
    assert contents[0].text == "現在の時刻: 08:00:00 午前"


def test_call_tool_contents_accepts_missing_arguments(dispatcher):
    contents = stdio.call_tool_contents(dispatcher, "get_time", None)
    assert contents[0].text == "現在の時刻: 08:00:00"


def test_call_tool_contents_propagates_dispatch_errors(dispatcher):
    with pytest.raises(ToolNotFoundError, match="Unknown tool: nonexistent"):
        stdio.call_tool_contents(dispatcher, "nonexistent", {})


def test_build_server_registers_tool_handlers(dispatcher):
    settings = AppSettings(server=ServerSettings(name="Test Server", version="9.9.9"))

    server = stdio.build_server(dispatcher, settings)

    assert server.name == "Test Server"
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


def send_call_tool(server, name, arguments):
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )

    async def invoke():
        return await handler(request)

    return anyio.run(invoke).root


@pytest.mark.parametrize(
    "name, arguments, expected_text, expected_error",
    [
        ("say_hello", {"name": "Jean", "language": "french"}, "こんにちは、Jeanさん！", False),
        ("say_hello", {"name": "Alice", "language": "english"}, "Hello, Alice!", False),
        ("get_time", {"format": "36h"}, "現在の時刻: 08:00:00", False),
        ("nonexistent", {}, "Unknown tool: nonexistent", True),
        ("say_hello", {}, "Missing required argument 'name' for tool 'say_hello'", True),
    ],
)
def test_call_tool_request_through_server(dispatcher, name, arguments, expected_text, expected_error):
    server = stdio.build_server(dispatcher, AppSettings())

    result = send_call_tool(server, name, arguments)

    assert result.isError is expected_error
    assert len(result.content) == 1
    assert result.content[0].text == expected_text


class FailingServer:
    def create_initialization_options(self):
        return None

    async def run(self, read_stream, write_stream, options):
        raise RuntimeError("stream closed")


def test_serve_logs_session_errors(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture):
    @asynccontextmanager
    async def fake_stdio_server():
        yield (None, None)

    monkeypatch.setattr(stdio, "stdio_server", fake_stdio_server)
    caplog.set_level(logging.INFO, logger="hello_mcp.stdio")

    with pytest.raises(RuntimeError, match="stream closed"):
        anyio.run(stdio.serve, FailingServer())

    assert "Hello World MCP server running on stdio" in caplog.text
    assert "[MCP Error]" in caplog.text


def test_main_reports_startup_failure(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture):
    async def failing_serve():
        raise OSError("stdin unavailable")

    monkeypatch.setattr(stdio, "serve", failing_serve)
    caplog.set_level(logging.ERROR, logger="hello_mcp.stdio")

    assert stdio.main() == 1
    assert "Failed to start server" in caplog.text
