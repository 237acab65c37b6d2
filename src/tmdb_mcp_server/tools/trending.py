"""Trending charts for every media type."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from tmdb_mcp_server.client import SupportsFetch
from tmdb_mcp_server.tooling import ToolDefinition, ToolParameters, ToolResult
from tmdb_mcp_server.tools.common import (
    TimeWindow,
    fetch_result,
    include_adult_field,
    language_field,
    page_field,
    region_field,
)


class TrendingParams(ToolParameters):
    """Parameters shared by every trending chart."""

    time_window: TimeWindow = Field(description="Time window: day or week")
    page: int | None = page_field()
    language: str | None = language_field()


class RegionalTrendingParams(TrendingParams):
    """Parameters for the trending charts that accept region filters."""

    region: str | None = region_field()
    include_adult: bool | None = include_adult_field()


def trending_all_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the trending_all tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = RegionalTrendingParams.model_validate(raw_params)
        return await fetch_result(
            client,
            f"/trending/all/{params.time_window}",
            {
                "page": params.page,
                "language": params.language,
                "region": params.region,
                "include_adult": params.include_adult,
            },
        )

    return ToolDefinition(
        name="trending_all",
        description=(
            "Retrieves trending movies, TV shows and people together. Input: "
            "time_window (required: day|week), page (optional), language "
            "(optional ISO 639-1), region (optional ISO 3166-1), include_adult "
            "(optional boolean). Output: JSON with paginated trending results."
        ),
        parameters_model=RegionalTrendingParams,
        handler=handler,
    )


def trending_movies_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the trending_movies tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = RegionalTrendingParams.model_validate(raw_params)
        return await fetch_result(
            client,
            f"/trending/movie/{params.time_window}",
            {
                "page": params.page,
                "language": params.language,
                "region": params.region,
                "include_adult": params.include_adult,
            },
        )

    return ToolDefinition(
        name="trending_movies",
        description=(
            "Retrieves trending movies. Input: time_window (required: day|week), "
            "page (optional), language (optional ISO 639-1), region (optional "
            "ISO 3166-1), include_adult (optional boolean). Output: JSON with "
            "paginated trending results."
        ),
        parameters_model=RegionalTrendingParams,
        handler=handler,
    )


def trending_tv_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the trending_tv tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = TrendingParams.model_validate(raw_params)
        return await fetch_result(
            client,
            f"/trending/tv/{params.time_window}",
            {"page": params.page, "language": params.language},
        )

    return ToolDefinition(
        name="trending_tv",
        description=(
            "Retrieves trending TV shows. Input: time_window (required: "
            "day|week), page (optional), language (optional ISO 639-1). Output: "
            "JSON with paginated trending results."
        ),
        parameters_model=TrendingParams,
        handler=handler,
    )


def trending_people_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the trending_people tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = TrendingParams.model_validate(raw_params)
        return await fetch_result(
            client,
            f"/trending/person/{params.time_window}",
            {"page": params.page, "language": params.language},
        )

    return ToolDefinition(
        name="trending_people",
        description=(
            "Retrieves trending people (actors, directors, crew). Input: "
            "time_window (required: day|week), page (optional), language "
            "(optional ISO 639-1). Output: JSON with paginated trending results."
        ),
        parameters_model=TrendingParams,
        handler=handler,
    )
