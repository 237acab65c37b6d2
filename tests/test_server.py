"""Tests for the tool registry and dispatcher."""

from __future__ import annotations

import json
from typing import Any

import anyio
import pytest

from tmdb_mcp_server.diagnostics import DiagnosticsSink, Severity
from tmdb_mcp_server.errors import InvalidInputError, UnknownToolError, UpstreamError
from tmdb_mcp_server.server import MCPServer
from tmdb_mcp_server.tooling import ToolDefinition, ToolParameters, ToolResult
from tmdb_mcp_server.tools import build_tools


class EchoParameters(ToolParameters):
    """Parameters for the echo tool."""

    word: str


def echo_tool(name: str = "echo") -> ToolDefinition:
    """Create a tool that returns its argument without network access."""

    async def handler(params: dict[str, Any]) -> ToolResult:
        return ToolResult.from_payload({"echo": params["word"]})

    return ToolDefinition(
        name=name,
        description="Echo a word back.",
        parameters_model=EchoParameters,
        handler=handler,
    )


class TestRegistry:
    """Behavioral coverage for tool registration and listing."""

    def test_register_and_list_tools(self) -> None:
        """Registered tools appear in the catalog with their schema."""
        # Arrange
        server = MCPServer()

        # Act
        server.register_tool(echo_tool())

        # Assert
        catalog = server.list_tools()
        assert [entry["name"] for entry in catalog] == ["echo"]
        assert catalog[0]["description"] == "Echo a word back."
        schema = catalog[0]["input_schema"]
        assert schema["required"] == ["word"]
        assert schema["additionalProperties"] is False
        assert "handler" not in catalog[0]

    def test_prevents_duplicate_tool_names(self) -> None:
        """Duplicate tool registrations raise a ValueError."""
        # Arrange
        server = MCPServer()
        server.register_tool(echo_tool())

        # Act / Assert
        with pytest.raises(ValueError):
            server.register_tool(echo_tool())

    def test_listing_is_deterministic(self, fake_tmdb) -> None:
        """Repeated listings return the same ordered catalog."""
        # Arrange
        server = MCPServer()
        server.register_tools(*build_tools(fake_tmdb))

        # Act
        first = server.list_tools()
        second = server.list_tools()

        # Assert
        assert first == second
        assert server.tool_names() == [entry["name"] for entry in first]
        assert server.get_tool("search_tmdb") is not None
        assert server.get_tool("missing") is None


class TestCallTool:
    """Behavioral coverage for MCPServer.call_tool."""

    @pytest.mark.anyio()
    async def test_runs_registered_tool(self, diagnostics) -> None:
        """A successful call returns the handler's result and logs twice."""
        # Arrange
        server = MCPServer(diagnostics)
        server.register_tool(echo_tool())

        # Act
        result = await server.call_tool("echo", {"word": "hi"})

        # Assert
        assert json.loads(result.content[0].text) == {"echo": "hi"}
        assert diagnostics.levels() == ["info", "info"]
        assert diagnostics.messages[0] == (
            "info",
            'Calling tool: echo with args: {"word": "hi"}',
        )
        assert diagnostics.messages[1][1].startswith("Tool success: echo in ")
        assert diagnostics.messages[1][1].endswith("ms")

    @pytest.mark.anyio()
    async def test_unknown_tool_never_reaches_upstream(
        self, fake_tmdb, diagnostics
    ) -> None:
        """Unknown names fail before any upstream access."""
        # Arrange
        server = MCPServer(diagnostics)
        server.register_tools(*build_tools(fake_tmdb))

        # Act / Assert
        with pytest.raises(UnknownToolError) as error_info:
            await server.call_tool("no_such_tool", {"q": 1})

        assert error_info.value.name == "no_such_tool"
        assert str(error_info.value) == "Unknown tool: no_such_tool"
        assert fake_tmdb.calls == []
        assert diagnostics.messages == [
            ("error", 'Unknown tool called: no_such_tool with args: {"q": 1}')
        ]

    @pytest.mark.anyio()
    async def test_rejects_invalid_parameters(self, diagnostics) -> None:
        """Arguments outside the schema are rejected before the handler runs."""
        # Arrange
        server = MCPServer(diagnostics)
        server.register_tool(echo_tool())

        # Act / Assert
        with pytest.raises(InvalidInputError) as error_info:
            await server.call_tool("echo", {"word": "hi", "unexpected": "value"})

        assert "unexpected" in str(error_info.value)
        assert error_info.value.to_dict()["error"]["type"] == "InvalidInput"
        assert diagnostics.levels() == ["info", "error"]

    @pytest.mark.anyio()
    async def test_reraises_handler_failure_unchanged(self, diagnostics) -> None:
        """The caller sees the exact exception object raised by the tool."""
        # Arrange
        failure = UpstreamError(500, "boom")

        async def handler(_: dict[str, Any]) -> ToolResult:
            raise failure

        server = MCPServer(diagnostics)
        server.register_tool(
            ToolDefinition(
                name="broken",
                description="Always fails.",
                parameters_model=ToolParameters,
                handler=handler,
            )
        )

        # Act / Assert
        with pytest.raises(UpstreamError) as error_info:
            await server.call_tool("broken")

        assert error_info.value is failure
        assert diagnostics.messages[-1] == (
            "error",
            "Tool error: broken -> TMDB request failed 500: boom",
        )

    @pytest.mark.anyio()
    async def test_upstream_404_is_reported_once(self, fake_tmdb, diagnostics) -> None:
        """A 404 from TMDB propagates with its status and body."""
        # Arrange
        fake_tmdb.responses["/movie/999"] = UpstreamError(404, "Not Found")
        server = MCPServer(diagnostics)
        server.register_tools(*build_tools(fake_tmdb))

        # Act / Assert
        with pytest.raises(UpstreamError) as error_info:
            await server.call_tool("get_tmdb_details", {"type": "movie", "id": 999})

        assert "404" in str(error_info.value)
        assert "Not Found" in str(error_info.value)
        errors = [
            message for level, message in diagnostics.messages if level == "error"
        ]
        assert len(errors) == 1
        assert "get_tmdb_details" in errors[0]

    @pytest.mark.anyio()
    async def test_diagnostics_override_per_call(self, diagnostics) -> None:
        """A per-call sink replaces the server default."""
        # Arrange
        default_sink = type(diagnostics)()
        server = MCPServer(default_sink)
        server.register_tool(echo_tool())

        # Act
        await server.call_tool("echo", {"word": "x"}, diagnostics=diagnostics)

        # Assert
        assert default_sink.messages == []
        assert len(diagnostics.messages) == 2

    @pytest.mark.anyio()
    async def test_concurrent_calls_are_independent(self, fake_tmdb) -> None:
        """One tool failing does not affect a concurrent call to another."""
        # Arrange
        fake_tmdb.responses["/trending/all/day"] = UpstreamError(503, "down")
        fake_tmdb.responses["/tv/popular"] = {"page": 1, "results": [{"id": 7}]}
        server = MCPServer()
        server.register_tools(*build_tools(fake_tmdb))
        outcomes: dict[str, object] = {}

        async def run(name: str, arguments: dict[str, Any]) -> None:
            try:
                outcomes[name] = await server.call_tool(name, arguments)
            except UpstreamError as error:
                outcomes[name] = error

        # Act
        async with anyio.create_task_group() as group:
            group.start_soon(run, "trending_all", {"time_window": "day"})
            group.start_soon(run, "tv_popular", {})

        # Assert
        assert isinstance(outcomes["trending_all"], UpstreamError)
        popular = outcomes["tv_popular"]
        assert isinstance(popular, ToolResult)
        assert json.loads(popular.content[0].text)["results"] == [{"id": 7}]


class FailingDiagnostics(DiagnosticsSink):
    """Sink whose channel is gone; every notification raises."""

    def __init__(self) -> None:
        self.attempts: list[Severity] = []

    def notify(self, level: Severity, message: str) -> None:
        self.attempts.append(level)
        raise ConnectionError("sink down")


class TestFailingDiagnostics:
    """A broken diagnostics sink never changes the outcome of a call."""

    @pytest.mark.anyio()
    async def test_unknown_tool_error_survives(self) -> None:
        """The caller still sees UnknownToolError."""
        # Arrange
        sink = FailingDiagnostics()
        server = MCPServer(sink)

        # Act / Assert
        with pytest.raises(UnknownToolError):
            await server.call_tool("nope", {})

        assert sink.attempts == ["error"]

    @pytest.mark.anyio()
    async def test_successful_call_returns_result(self, fake_tmdb) -> None:
        """A call that succeeded is not turned into a failure afterwards."""
        # Arrange
        fake_tmdb.responses["/tv/popular"] = {"page": 1, "results": []}
        sink = FailingDiagnostics()
        server = MCPServer(sink)
        server.register_tools(*build_tools(fake_tmdb))

        # Act
        result = await server.call_tool("tv_popular", {})

        # Assert
        assert json.loads(result.content[0].text) == {"page": 1, "results": []}
        assert sink.attempts == ["info", "info"]

    @pytest.mark.anyio()
    async def test_tool_failure_is_reraised(self, fake_tmdb) -> None:
        """The tool's own exception reaches the caller, not the sink's."""
        # Arrange
        failure = UpstreamError(404, "Not Found")
        fake_tmdb.responses["/movie/1"] = failure
        server = MCPServer(FailingDiagnostics())
        server.register_tools(*build_tools(fake_tmdb))

        # Act / Assert
        with pytest.raises(UpstreamError) as error_info:
            await server.call_tool("get_tmdb_details", {"type": "movie", "id": 1})

        assert error_info.value is failure
