"""Greeting tool."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..registry import ToolContext
from . import register_tool

DEFAULT_LANGUAGE = "japanese"


@dataclass(frozen=True)
class SayHelloArguments:
    name: str
    language: Optional[str] = None


@register_tool("say_hello", arguments=SayHelloArguments)
def say_hello(arguments: SayHelloArguments, context: ToolContext) -> str:
    """Greet ``name`` in English or, by default, in Japanese.

    The name is interpolated as given; the output is display text only.
    """

    language = arguments.language or DEFAULT_LANGUAGE
    if language == "english":
        return f"Hello, {arguments.name}!"
    return f"こんにちは、{arguments.name}さん！"


__all__ = ["DEFAULT_LANGUAGE", "SayHelloArguments", "say_hello"]
