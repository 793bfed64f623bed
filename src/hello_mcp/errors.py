"""Exceptions raised while dispatching a tool invocation."""
from __future__ import annotations

from typing import Any, Dict, Sequence


class DispatchError(Exception):
    """Base class for failures scoped to a single invocation."""

    kind = "DispatchError"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "message": str(self)}


class ToolNotFoundError(DispatchError, LookupError):
    """Raised when a requested tool is not present in the registry."""

    kind = "ToolNotFound"

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ValidationFailure(DispatchError, ValueError):
    """Raised when raw arguments cannot be resolved against a tool schema."""

    kind = "ValidationFailure"

    def __init__(self, tool_name: str, message: str) -> None:
        super().__init__(message)
        self.tool_name = tool_name


class MissingArgumentError(ValidationFailure):
    kind = "MissingArgument"

    def __init__(self, tool_name: str, missing_property: str) -> None:
        super().__init__(
            tool_name,
            f"Missing required argument '{missing_property}' for tool '{tool_name}'",
        )
        self.missing_property = missing_property

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["property"] = self.missing_property
        return payload


class InvalidChoiceError(ValidationFailure):
    kind = "InvalidChoice"

    def __init__(
        self,
        tool_name: str,
        property_name: str,
        value: Any,
        choices: Sequence[str],
    ) -> None:
        super().__init__(
            tool_name,
            f"Invalid value {value!r} for '{property_name}'; expected one of: "
            + ", ".join(choices),
        )
        self.property_name = property_name
        self.value = value
        self.choices = tuple(choices)

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["property"] = self.property_name
        payload["choices"] = list(self.choices)
        return payload


__all__ = [
    "DispatchError",
    "ToolNotFoundError",
    "ValidationFailure",
    "MissingArgumentError",
    "InvalidChoiceError",
]
