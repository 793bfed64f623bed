"""Hello World MCP server package initialization."""
from . import core, tools
from .core import Dispatcher, call_tool, get_dispatcher, list_tools, run_tool

# Ensure all tool modules are imported so that the registry is populated.
tools.ensure_tools_registered()

__all__ = [
    "Dispatcher",
    "call_tool",
    "get_dispatcher",
    "list_tools",
    "run_tool",
]
