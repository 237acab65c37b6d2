"""Tool registry and dispatcher.

The server tracks registered tools and routes calls to them by name. It is
free of transport details: the FastMCP adapter (or any other transport) only
needs :meth:`MCPServer.list_tools` and :meth:`MCPServer.call_tool`.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from tmdb_mcp_server.diagnostics import DiagnosticsSink, LoggingDiagnostics, Severity
from tmdb_mcp_server.errors import UnknownToolError
from tmdb_mcp_server.tooling import ToolDefinition, ToolResult

logger = logging.getLogger(__name__)


def _dump_arguments(arguments: dict[str, Any]) -> str:
    return json.dumps(arguments, default=str)


def _emit(sink: DiagnosticsSink, level: Severity, message: str) -> None:
    try:
        sink.notify(level, message)
    except Exception as exc:
        logger.debug("Diagnostics sink failed: %s", exc)


class MCPServer:
    """In-memory registry and dispatcher for MCP tools.

    The registry is filled once at startup and only read afterwards, so calls
    need no locking and concurrent calls run independently.
    """

    def __init__(self, diagnostics: DiagnosticsSink | None = None) -> None:
        """Initialize an empty server registry."""
        self._tools: dict[str, ToolDefinition] = {}
        self._diagnostics = diagnostics or LoggingDiagnostics()

    def register_tool(self, tool: ToolDefinition) -> None:
        """Register a tool with the server.

        Args:
            tool: Tool definition to register.

        Raises:
            ValueError: If a tool with the same name is already registered.

        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def register_tools(self, *tools: ToolDefinition) -> None:
        """Register multiple tools at once.

        Args:
            *tools: Collection of tool definitions to register.

        """
        for tool in tools:
            self.register_tool(tool)

    def get_tool(self, name: str) -> ToolDefinition | None:
        """Return the tool registered under ``name``, if any."""
        return self._tools.get(name)

    def definitions(self) -> list[ToolDefinition]:
        """List registered tool definitions in registration order."""
        return list(self._tools.values())

    def tool_names(self) -> list[str]:
        """List tool names in registration order."""
        return list(self._tools)

    def list_tools(self) -> list[dict[str, Any]]:
        """Produce the ordered catalog used for discovery.

        Returns:
            One ``{name, description, input_schema}`` mapping per tool, in
            registration order.

        """
        return [tool.metadata() for tool in self._tools.values()]

    async def call_tool(
        self,
        name: str,
        arguments: dict[str, Any] | None = None,
        *,
        diagnostics: DiagnosticsSink | None = None,
    ) -> ToolResult:
        """Validate arguments and execute a registered tool.

        Args:
            name: Name of the registered tool to execute.
            arguments: Raw arguments supplied by the caller.
            diagnostics: Sink for this call; defaults to the server's sink.

        Raises:
            UnknownToolError: If the tool name is not registered.
            InvalidInputError: If argument validation fails.
            Exception: Any failure of the tool itself, re-raised unchanged.

        Returns:
            The tool's result, unchanged.

        """
        sink = diagnostics or self._diagnostics
        arguments = arguments or {}
        tool = self._tools.get(name)
        if tool is None:
            _emit(
                sink,
                "error",
                f"Unknown tool called: {name or '<missing>'} "
                f"with args: {_dump_arguments(arguments)}",
            )
            raise UnknownToolError(name)

        _emit(
            sink,
            "info",
            f"Calling tool: {name} with args: {_dump_arguments(arguments)}",
        )
        try:
            start = time.perf_counter()
            validated = tool.validate(arguments)
            result = await tool.handler(validated)
        except Exception as exc:
            _emit(sink, "error", f"Tool error: {name} -> {exc}")
            raise
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        _emit(sink, "info", f"Tool success: {name} in {elapsed_ms}ms")
        return result
