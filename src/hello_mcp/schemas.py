"""Pydantic models for the tool invocation envelope."""
from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field

from .catalog import ToolDescriptor


class ContentBlock(BaseModel):
    type: Literal["text"] = "text"
    text: str


class InvocationRequest(BaseModel):
    """Request payload describing a tool invocation."""

    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


class InvocationResult(BaseModel):
    """Successful result of one invocation."""

    content: List[ContentBlock]

    @classmethod
    def from_text(cls, text: str) -> InvocationResult:
        return cls(content=[ContentBlock(text=text)])


class ToolListResponse(BaseModel):
    tools: List[ToolDescriptor]


__all__ = [
    "ContentBlock",
    "InvocationRequest",
    "InvocationResult",
    "ToolListResponse",
]
