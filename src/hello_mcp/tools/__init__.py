"""Tool registration for the Hello World MCP server."""
from importlib import import_module

from ..catalog import CATALOG
from ..registry import TOOL_REGISTRY, register_tool

__all__ = ["register_tool", "ensure_tools_registered"]

_TOOL_MODULES = ("say_hello", "get_time")

_TOOLS_REGISTERED = False


def ensure_tools_registered() -> None:
    """Import every tool module exactly once so decorators execute."""
    global _TOOLS_REGISTERED
    if _TOOLS_REGISTERED:
        return

    for module_name in _TOOL_MODULES:
        import_module(f"{__name__}.{module_name}")

    missing = [descriptor.name for descriptor in CATALOG if descriptor.name not in TOOL_REGISTRY]
    if missing:
        raise RuntimeError(f"No handler registered for: {', '.join(missing)}")

    _TOOLS_REGISTERED = True
