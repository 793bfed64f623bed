"""Command line interface for the Hello World MCP server."""
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, Iterable

from common.config import get_settings
from common.logging import configure_logging

from . import core


def _parse_parameter_arguments(arguments: Iterable[str]) -> Dict[str, str]:
    """Parse ``--key value`` pairs from ``arguments`` into a dictionary."""

    parameters: Dict[str, str] = {}
    args = list(arguments)
    index = 0
    while index < len(args):
        name = args[index]
        if not name.startswith("--") or len(name) == 2:
            raise ValueError(f"Expected --key value pair, got '{name}'")
        key = name[2:]
        index += 1
        if index >= len(args):
            raise ValueError(f"Missing value for argument '{name}'")
        parameters[key] = args[index]
        index += 1
    return parameters


def _emit(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, ensure_ascii=False), file=sys.stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hello World MCP server command line interface")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-tools", help="Print the advertised tool catalog")

    run_parser = subparsers.add_parser("run-tool", help="Execute a registered tool")
    run_parser.add_argument("tool", help="Name of the tool to execute")
    run_parser.add_argument("tool_args", nargs=argparse.REMAINDER, help="Tool-specific parameters")

    subparsers.add_parser("serve", help="Serve the tools over MCP stdio")

    http_parser = subparsers.add_parser("serve-http", help="Serve the tools over HTTP")
    http_parser.add_argument("--host", default=None, help="Interface to bind")
    http_parser.add_argument("--port", type=int, default=None, help="Port to bind")

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    settings = get_settings()
    configure_logging(settings.log_level)

    if args.command == "list-tools":
        _emit(core.list_tools())
        return 0

    if args.command == "run-tool":
        try:
            parameters = _parse_parameter_arguments(args.tool_args)
        except ValueError as exc:
            _emit({
                "status": "error",
                "error": {
                    "type": "InvalidParameters",
                    "message": str(exc),
                },
            })
            return 2

        response = core.run_tool(args.tool, parameters)
        _emit(response)
        return 0 if response.get("status") == "success" else 1

    if args.command == "serve":
        from .stdio import main as serve_stdio

        return serve_stdio()

    if args.command == "serve-http":
        import uvicorn

        uvicorn.run(
            "hello_mcp.http:app",
            host=args.host or settings.http.host,
            port=args.port or settings.http.port,
            log_level=settings.log_level.lower(),
        )
        return 0

    parser.error("Unknown command")
    return 2


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
