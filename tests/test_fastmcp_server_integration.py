"""End-to-end coverage for the FastMCP server wrapper."""

from __future__ import annotations

import json

import httpx
import pytest
from fastmcp.client import Client
from fastmcp.client.logging import LogHandler, LogMessage

from tmdb_mcp_server.config import TmdbSettings
from tmdb_mcp_server.fastmcp_adapter import build_fastmcp_app


def _tmdb_transport(requests: list[httpx.Request]) -> httpx.MockTransport:
    """Serve a tiny slice of TMDB from memory."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        path = request.url.path.removeprefix("/service/tmdb/3")
        if path == "/search/multi":
            return httpx.Response(
                200,
                json={
                    "page": 1,
                    "total_pages": 1,
                    "total_results": 1,
                    "results": [{"id": 1, "title": "X", "release_date": "2020-01-01"}],
                },
            )
        if path == "/movie/550":
            return httpx.Response(200, json={"id": 550, "title": "Fight Club"})
        return httpx.Response(404, text="Not Found")

    return httpx.MockTransport(handler)


def _log_collector(received: list[tuple[str, str]]) -> LogHandler:
    """Record MCP log notifications as (level, message) pairs."""

    async def handler(message: LogMessage) -> None:
        received.append((message.level, message.data["msg"]))

    return handler


@pytest.mark.anyio()
async def test_fastmcp_server_supports_tool_discovery(settings: TmdbSettings) -> None:
    """The FastMCP server exposes the TMDB toolset via the official protocol."""
    requests: list[httpx.Request] = []
    app, server = build_fastmcp_app(settings, transport=_tmdb_transport(requests))

    async with Client(app) as client:
        tools = await client.list_tools()
        tool_names = [tool.name for tool in tools]

        assert set(tool_names) == set(server.tool_names())
        search = next(tool for tool in tools if tool.name == "search_tmdb")
        assert search.inputSchema["required"] == ["query"]

        search_result = await client.call_tool("search_tmdb", {"query": "x"})
        payload = json.loads(search_result.content[0].text)
        assert payload["results"][0]["media_type"] == "movie"

        details = await client.call_tool(
            "get_tmdb_details", {"type": "movie", "id": 550}
        )
        assert json.loads(details.content[0].text)["title"] == "Fight Club"

    assert [request.url.path for request in requests] == [
        "/service/tmdb/3/search/multi",
        "/service/tmdb/3/movie/550",
    ]


@pytest.mark.anyio()
async def test_fastmcp_propagates_upstream_errors(settings: TmdbSettings) -> None:
    """Upstream failures surface through FastMCP client calls."""
    requests: list[httpx.Request] = []
    app, _ = build_fastmcp_app(settings, transport=_tmdb_transport(requests))

    async with Client(app) as client:
        result = await client.call_tool(
            "get_tmdb_details",
            {"type": "tv", "id": 999},
            raise_on_error=False,
        )

    assert result.is_error is True
    assert "404" in result.content[0].text
    assert "Not Found" in result.content[0].text


@pytest.mark.anyio()
async def test_fastmcp_rejects_invalid_arguments(settings: TmdbSettings) -> None:
    """Schema violations go through the dispatcher without reaching TMDB."""
    requests: list[httpx.Request] = []
    received: list[tuple[str, str]] = []
    app, _ = build_fastmcp_app(settings, transport=_tmdb_transport(requests))

    async with Client(app, log_handler=_log_collector(received)) as client:
        result = await client.call_tool(
            "trending_all", {"time_window": "year"}, raise_on_error=False
        )

    assert result.is_error is True
    assert "Invalid parameters for tool 'trending_all'" in result.content[0].text
    assert requests == []
    assert [level for level, _ in received] == ["info", "error"]
    assert received[0][1].startswith("Calling tool: trending_all with args:")
    assert received[1][1].startswith("Tool error: trending_all -> ")


@pytest.mark.anyio()
async def test_fastmcp_reports_unknown_tool_diagnostic(
    settings: TmdbSettings,
) -> None:
    """Calls to unregistered names still emit the unknown-tool diagnostic."""
    requests: list[httpx.Request] = []
    received: list[tuple[str, str]] = []
    app, _ = build_fastmcp_app(settings, transport=_tmdb_transport(requests))

    async with Client(app, log_handler=_log_collector(received)) as client:
        result = await client.call_tool("nope", {"q": 1}, raise_on_error=False)

    assert result.is_error is True
    assert "Unknown tool: nope" in result.content[0].text
    assert received == [("error", 'Unknown tool called: nope with args: {"q": 1}')]
    assert requests == []


@pytest.mark.anyio()
async def test_fastmcp_sends_call_diagnostics(settings: TmdbSettings) -> None:
    """A successful call reports its start and its completion to the client."""
    requests: list[httpx.Request] = []
    received: list[tuple[str, str]] = []
    app, _ = build_fastmcp_app(settings, transport=_tmdb_transport(requests))

    async with Client(app, log_handler=_log_collector(received)) as client:
        await client.call_tool("get_tmdb_details", {"type": "movie", "id": 550})

    assert received[0] == (
        "info",
        'Calling tool: get_tmdb_details with args: {"type": "movie", "id": 550}',
    )
    assert received[1][0] == "info"
    assert received[1][1].startswith("Tool success: get_tmdb_details in ")
