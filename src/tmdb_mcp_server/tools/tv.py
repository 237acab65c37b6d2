"""TV series charts and credits."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from tmdb_mcp_server.client import SupportsFetch
from tmdb_mcp_server.tooling import ToolDefinition, ToolParameters, ToolResult
from tmdb_mcp_server.tools.common import (
    fetch_result,
    language_field,
    page_field,
    region_field,
)


class TvChartParams(ToolParameters):
    """Parameters for the regional TV charts."""

    page: int | None = page_field()
    language: str | None = language_field()
    region: str | None = region_field()


class TvAiringTodayParams(ToolParameters):
    """Parameters for tv_airing_today."""

    page: int | None = page_field()
    language: str | None = language_field()
    timezone: str | None = Field(
        default=None,
        description="Timezone for the airing day (e.g., America/New_York)",
    )


class TvCreditsParams(ToolParameters):
    """Parameters for tv_credits."""

    tv_id: int = Field(description="TMDB TV Show ID")
    language: str | None = language_field()


def _chart_tool(
    name: str, chart: str, description: str, client: SupportsFetch
) -> ToolDefinition:
    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = TvChartParams.model_validate(raw_params)
        return await fetch_result(
            client,
            f"/tv/{chart}",
            {
                "page": params.page,
                "language": params.language,
                "region": params.region,
            },
        )

    return ToolDefinition(
        name=name,
        description=description,
        parameters_model=TvChartParams,
        handler=handler,
    )


def tv_top_rated_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the tv_top_rated tool."""
    return _chart_tool(
        "tv_top_rated",
        "top_rated",
        (
            "Retrieves the top-rated TV series. Input: page (optional), language "
            "(optional ISO 639-1), region (optional ISO 3166-1). Output: JSON "
            "with paginated results."
        ),
        client,
    )


def tv_popular_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the tv_popular tool."""
    return _chart_tool(
        "tv_popular",
        "popular",
        (
            "Retrieves currently popular TV series. Input: page (optional), "
            "language (optional ISO 639-1), region (optional ISO 3166-1). Output: "
            "JSON with paginated results."
        ),
        client,
    )


def tv_airing_today_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the tv_airing_today tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = TvAiringTodayParams.model_validate(raw_params)
        return await fetch_result(
            client,
            "/tv/airing_today",
            {
                "page": params.page,
                "language": params.language,
                "timezone": params.timezone,
            },
        )

    return ToolDefinition(
        name="tv_airing_today",
        description=(
            "Retrieves TV series with an episode airing today. Input: page "
            "(optional), language (optional ISO 639-1), timezone (optional). "
            "Output: JSON with paginated results."
        ),
        parameters_model=TvAiringTodayParams,
        handler=handler,
    )


def tv_credits_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the tv_credits tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = TvCreditsParams.model_validate(raw_params)
        return await fetch_result(
            client, f"/tv/{params.tv_id}/credits", {"language": params.language}
        )

    return ToolDefinition(
        name="tv_credits",
        description=(
            "Fetches the cast and crew of a TV show. Input: tv_id (required TMDB "
            "ID), language (optional ISO 639-1). Output: JSON with cast and crew "
            "arrays."
        ),
        parameters_model=TvCreditsParams,
        handler=handler,
    )
