"""Tool registry mapping advertised names to their handlers."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Mapping

from .catalog import ToolDescriptor, get_descriptor

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class ToolContext:
    """Collaborators a handler may read besides its arguments."""

    clock: Clock = field(default=datetime.now)


ToolFunction = Callable[[Any, ToolContext], str]


@dataclass(frozen=True)
class ToolHandler:
    """A catalog entry bound to its typed arguments and effect function."""

    descriptor: ToolDescriptor
    arguments_type: Callable[..., Any]
    function: ToolFunction

    @property
    def name(self) -> str:
        return self.descriptor.name

    def bind(self, resolved: Mapping[str, Any]) -> Any:
        return self.arguments_type(**resolved)

    def __call__(self, resolved: Mapping[str, Any], context: ToolContext) -> str:
        return self.function(self.bind(resolved), context)


TOOL_REGISTRY: Dict[str, ToolHandler] = {}


def register_tool(
    name: str, *, arguments: Callable[..., Any]
) -> Callable[[ToolFunction], ToolFunction]:
    """Register a callable as the handler of catalog tool ``name``."""

    descriptor = get_descriptor(name)
    if descriptor is None:
        raise ValueError(f"Tool '{name}' is not declared in the catalog")

    def decorator(func: ToolFunction) -> ToolFunction:
        TOOL_REGISTRY[name] = ToolHandler(
            descriptor=descriptor,
            arguments_type=arguments,
            function=func,
        )
        return func

    return decorator


__all__ = [
    "Clock",
    "TOOL_REGISTRY",
    "ToolContext",
    "ToolFunction",
    "ToolHandler",
    "register_tool",
]
