"""Entry point for the TMDB MCP server."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from tmdb_mcp_server.config import load_settings
from tmdb_mcp_server.errors import ConfigurationError, MCPError
from tmdb_mcp_server.fastmcp_adapter import build_fastmcp_app

logger = logging.getLogger("tmdb_mcp_server")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the server CLI."""
    parser = argparse.ArgumentParser(description="TMDB MCP server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse", "streamable-http"],
        default="stdio",
        help="MCP transport to serve (default: stdio)",
    )
    parser.add_argument("--host", default=None, help="Bind host for HTTP transports")
    parser.add_argument("--port", type=int, default=None, help="Bind port")
    parser.add_argument("--path", default=None, help="URL path for HTTP transports")
    parser.add_argument("--log-level", default=None, help="Override TMDB_LOG_LEVEL")
    parser.add_argument(
        "--catalog", action="store_true", help="Print the tool catalog and exit"
    )
    parser.add_argument("--call", metavar="TOOL", help="Run one tool and exit")
    parser.add_argument(
        "--arguments",
        default="{}",
        help="JSON object of arguments for --call",
    )
    return parser


def configure_logging(level: str) -> None:
    """Send logs to stderr; stdout carries the stdio transport."""
    logging.basicConfig(
        level=level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Load configuration, register tools and serve them."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as error:
        print(f"[tmdb-mcp] Fatal error: {error}", file=sys.stderr)
        return 1
    configure_logging(args.log_level or settings.log_level)

    app, server = build_fastmcp_app(settings)

    if args.catalog:
        print(json.dumps(server.list_tools(), indent=2))
        return 0

    if args.call:
        try:
            arguments = json.loads(args.arguments)
            result = asyncio.run(server.call_tool(args.call, arguments))
        except json.JSONDecodeError as error:
            parser.error(f"--arguments is not valid JSON: {error}")
        except MCPError as error:
            print(json.dumps(error.to_dict(), indent=2))
            return 1
        print(result.to_json())
        return 0

    run_kwargs: dict[str, object] = {}
    if args.transport != "stdio":
        for option in ("host", "port", "path"):
            value = getattr(args, option)
            if value is not None:
                run_kwargs[option] = value
    logger.info(
        "Server starting on %s. Tools: %s",
        args.transport,
        ", ".join(server.tool_names()),
    )
    app.run(transport=args.transport, **run_kwargs)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
