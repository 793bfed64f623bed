"""Static catalog of the tools advertised by the server.

The catalog is built once at import time and never mutated. Its order is the
order returned by ``tools/list``; names, required flags, enum choices and
defaults are part of the public contract clients use to build their UI.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SchemaNode(BaseModel):
    """JSON-schema fragment describing the accepted shape of an argument."""

    model_config = ConfigDict(frozen=True)

    type: Literal["object", "string"]
    description: Optional[str] = None
    properties: Optional[Dict[str, SchemaNode]] = None
    required: Optional[List[str]] = None
    enum: Optional[List[str]] = None
    default: Optional[str] = None

    @model_validator(mode="after")
    def _check_invariants(self) -> SchemaNode:
        if self.enum is not None and self.default is not None and self.default not in self.enum:
            raise ValueError(f"default {self.default!r} is not one of {self.enum}")

        properties = self.properties or {}
        for name in self.required or []:
            if name not in properties:
                raise ValueError(f"required property '{name}' is not declared")
            if properties[name].default is not None:
                raise ValueError(f"required property '{name}' must not declare a default")
        return self

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


SchemaNode.model_rebuild()


class ToolDescriptor(BaseModel):
    """Name, description and input schema of one advertised tool."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: SchemaNode = Field(alias="inputSchema")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


SAY_HELLO = ToolDescriptor(
    name="say_hello",
    description="指定された名前に対して挨拶を返します",
    input_schema=SchemaNode(
        type="object",
        properties={
            "name": SchemaNode(type="string", description="挨拶する相手の名前"),
            "language": SchemaNode(
                type="string",
                description="挨拶の言語 (japanese, english)",
                enum=["japanese", "english"],
                default="japanese",
            ),
        },
        required=["name"],
    ),
)

GET_TIME = ToolDescriptor(
    name="get_time",
    description="現在の時刻を返します",
    input_schema=SchemaNode(
        type="object",
        properties={
            "format": SchemaNode(
                type="string",
                description="時刻のフォーマット (12h, 24h)",
                enum=["12h", "24h"],
                default="24h",
            ),
        },
    ),
)

CATALOG: Tuple[ToolDescriptor, ...] = (SAY_HELLO, GET_TIME)


def list_tools() -> Tuple[ToolDescriptor, ...]:
    """Return the advertised tools in enumeration order."""

    return CATALOG


def get_descriptor(name: str) -> Optional[ToolDescriptor]:
    for descriptor in CATALOG:
        if descriptor.name == name:
            return descriptor
    return None


__all__ = [
    "CATALOG",
    "GET_TIME",
    "SAY_HELLO",
    "SchemaNode",
    "ToolDescriptor",
    "get_descriptor",
    "list_tools",
]
