"""HTTP interface for the Hello World MCP tools."""
from __future__ import annotations

import importlib
from typing import Any, Dict

from fastapi import FastAPI, HTTPException

from common.config import get_settings

from . import core
from .errors import ToolNotFoundError, ValidationFailure
from .schemas import InvocationRequest, InvocationResult, ToolListResponse

_tools = importlib.import_module("hello_mcp.tools")  # noqa: F841  # Ensure registration side effects

app = FastAPI(title=get_settings().server.name, version=get_settings().server.version)


@app.get("/tools", response_model=ToolListResponse, response_model_exclude_none=True)
def list_tools() -> Dict[str, Any]:
    """Return the tool catalog in enumeration order."""
    return core.list_tools()


@app.post("/call_tool", response_model=InvocationResult)
def call_tool(payload: InvocationRequest) -> InvocationResult:
    """Invoke a registered tool via the core dispatcher."""
    try:
        return core.call_tool(payload.name, payload.arguments)
    except ToolNotFoundError as exc:
        raise HTTPException(status_code=404, detail=exc.to_dict()) from exc
    except ValidationFailure as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc
