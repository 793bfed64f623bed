"""Resolve raw invocation arguments against a tool's input schema."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .catalog import ToolDescriptor
from .errors import InvalidChoiceError, MissingArgumentError


def resolve(
    descriptor: ToolDescriptor,
    raw_arguments: Optional[Mapping[str, Any]] = None,
    *,
    strict_enums: bool = False,
) -> Dict[str, Any]:
    """Return one value per declared property that was supplied or defaulted.

    Supplied values are passed through unchanged. Missing properties take the
    schema default when one exists; a missing required property raises
    :class:`MissingArgumentError`. Optional properties without a default stay
    absent, and arguments the schema does not declare are dropped.

    Enum choices are advisory unless ``strict_enums`` is set, in which case a
    supplied value outside the declared choices raises
    :class:`InvalidChoiceError`.
    """

    schema = descriptor.input_schema
    raw = dict(raw_arguments or {})
    required = set(schema.required or ())
    resolved: Dict[str, Any] = {}

    for name, node in (schema.properties or {}).items():
        # JSON null counts as not supplied
        value = raw.get(name)
        if value is not None:
            if strict_enums and node.enum is not None and value not in node.enum:
                raise InvalidChoiceError(descriptor.name, name, value, node.enum)
            resolved[name] = value
        elif node.default is not None:
            resolved[name] = node.default
        elif name in required:
            raise MissingArgumentError(descriptor.name, name)

    return resolved


__all__ = ["resolve"]
