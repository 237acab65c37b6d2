"""Adapters for exposing TMDB tools via FastMCP.

Every ``tools/call`` request goes through :meth:`MCPServer.call_tool`, so the
caller receives the same diagnostics whether the tool is registered, the
arguments are invalid or the name is unknown.
"""

from __future__ import annotations

from typing import Any

import httpx
import mcp.types as mt
from fastmcp import Context, FastMCP
from fastmcp.server.dependencies import get_context
from fastmcp.server.middleware import CallNext, Middleware, MiddlewareContext
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult

from tmdb_mcp_server.client import TmdbClient
from tmdb_mcp_server.config import TmdbSettings
from tmdb_mcp_server.diagnostics import ChannelDiagnostics, Severity
from tmdb_mcp_server.server import MCPServer
from tmdb_mcp_server.tooling import ToolDefinition
from tmdb_mcp_server.tools import build_tools


def context_diagnostics(context: Context) -> ChannelDiagnostics:
    """Forward diagnostics to the client's MCP logging channel."""

    async def send(level: Severity, message: str) -> None:
        if level == "error":
            await context.error(message)
        else:
            await context.info(message)

    return ChannelDiagnostics(send)


def _current_context() -> Context | None:
    try:
        return get_context()
    except RuntimeError:
        return None


async def dispatch(
    server: MCPServer,
    name: str,
    arguments: dict[str, Any],
    context: Context | None,
) -> ToolResult:
    """Run ``name`` through the dispatcher and convert the result for FastMCP.

    Diagnostics still in flight are delivered before the result (or the
    error) is handed back, so they reach the client ahead of the response.
    """
    sink = context_diagnostics(context) if context is not None else None
    try:
        result = await server.call_tool(name, arguments, diagnostics=sink)
    finally:
        if sink is not None:
            await sink.drain()
    return ToolResult(
        content=[
            mt.TextContent(type="text", text=block.text) for block in result.content
        ]
    )


class ToolDefinitionAdapter(Tool):
    """Expose a :class:`ToolDefinition` as a FastMCP tool."""

    def __init__(self, definition: ToolDefinition, server: MCPServer) -> None:
        """Create a FastMCP tool wrapper dispatching through ``server``."""
        super().__init__(
            name=definition.name,
            description=definition.description,
            parameters=definition.input_schema(),
            tags=set(),
        )
        self._server = server

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        """Dispatch the call and convert the result to MCP content."""
        return await dispatch(self._server, self.name, arguments, _current_context())


class UnknownToolMiddleware(Middleware):
    """Send calls for unregistered names to the dispatcher.

    FastMCP would otherwise reject them itself, and the caller would never
    see the unknown-tool diagnostic.
    """

    def __init__(self, server: MCPServer) -> None:
        self._server = server

    async def on_call_tool(
        self,
        context: MiddlewareContext[mt.CallToolRequestParams],
        call_next: CallNext[mt.CallToolRequestParams, ToolResult],
    ) -> ToolResult:
        name = context.message.name
        if self._server.get_tool(name) is not None:
            return await call_next(context)
        return await dispatch(
            self._server,
            name,
            context.message.arguments or {},
            context.fastmcp_context,
        )


class TmdbFastMCP(FastMCP):
    """FastMCP server that leaves argument validation to the dispatcher.

    The low-level MCP server checks arguments against the published schema
    before any tool code runs. Turning that off lets invalid calls produce the
    dispatcher's diagnostics and its ``InvalidInput`` message instead.
    """

    def _setup_handlers(self) -> None:
        super()._setup_handlers()
        self._mcp_server.call_tool(validate_input=False)(self._mcp_call_tool)


def build_server(
    settings: TmdbSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> MCPServer:
    """Create a dispatcher with every TMDB tool registered."""
    server = MCPServer()
    server.register_tools(*build_tools(TmdbClient(settings, transport=transport)))
    return server


def build_fastmcp_app(
    settings: TmdbSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[FastMCP, MCPServer]:
    """Create a FastMCP server instance with all TMDB tools registered."""
    app = TmdbFastMCP(
        name="tmdb-mcp-server",
        instructions=(
            "Search, discovery, trending, credits, images, reviews and "
            "watch-provider lookups against The Movie Database (TMDB)."
        ),
    )
    server = build_server(settings, transport=transport)
    for definition in server.definitions():
        app.add_tool(ToolDefinitionAdapter(definition, server))
    app.add_middleware(UnknownToolMiddleware(server))
    return app, server
