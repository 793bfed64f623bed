"""Tests for the static tool catalog."""
from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import pytest
from pydantic import ValidationError

from hello_mcp.catalog import CATALOG, SchemaNode, get_descriptor, list_tools


def test_list_tools_returns_both_tools_in_order():
    first = list_tools()
    second = list_tools()

    assert [descriptor.name for descriptor in first] == ["say_hello", "get_time"]
    assert first == second


def test_say_hello_schema_contract():
    payload = get_descriptor("say_hello").to_payload()

    assert payload["description"] == "指定された名前に対して挨拶を返します"
    schema = payload["inputSchema"]
    assert schema["type"] == "object"
    assert schema["required"] == ["name"]
    assert schema["properties"]["name"] == {"type": "string", "description": "挨拶する相手の名前"}
    assert schema["properties"]["language"]["enum"] == ["japanese", "english"]
    assert schema["properties"]["language"]["default"] == "japanese"


def test_get_time_schema_contract():
    payload = get_descriptor("get_time").to_payload()

    schema = payload["inputSchema"]
    assert "required" not in schema
    assert schema["properties"]["format"]["enum"] == ["12h", "24h"]
    assert schema["properties"]["format"]["default"] == "24h"


def test_get_descriptor_unknown_name():
    assert get_descriptor("nonexistent") is None


def test_descriptors_are_immutable():
    with pytest.raises(ValidationError):
        CATALOG[0].name = "renamed"  # type: ignore[misc]


def test_default_outside_enum_is_rejected():
    with pytest.raises(ValidationError, match="not one of"):
        SchemaNode(type="string", enum=["12h", "24h"], default="48h")


def test_required_property_with_default_is_rejected():
    with pytest.raises(ValidationError, match="must not declare a default"):
        SchemaNode(
            type="object",
            properties={"name": SchemaNode(type="string", default="anon")},
            required=["name"],
        )


def test_required_property_must_be_declared():
    with pytest.raises(ValidationError, match="is not declared"):
        SchemaNode(type="object", properties={}, required=["name"])
