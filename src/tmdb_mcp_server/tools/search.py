"""Text search tools."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from tmdb_mcp_server.client import SupportsFetch
from tmdb_mcp_server.errors import InvalidInputError
from tmdb_mcp_server.normalize import normalize_search_page
from tmdb_mcp_server.tooling import ToolDefinition, ToolParameters, ToolResult
from tmdb_mcp_server.tools.common import (
    fetch_result,
    include_adult_field,
    language_field,
    page_field,
    region_field,
)


class SearchKeywordsParams(ToolParameters):
    """Parameters for search_keywords."""

    query: str = Field(description="Search query for keywords")
    page: int | None = page_field()


class SearchMultiParams(ToolParameters):
    """Parameters for search_tmdb."""

    query: str = Field(description="Search text query")
    page: int | None = page_field("Page number (1-1000)")
    language: str | None = language_field()
    include_adult: bool | None = include_adult_field()
    region: str | None = region_field()


class SearchMoviesParams(ToolParameters):
    """Parameters for search_tmdb_movies."""

    query: str = Field(description="Search query for movies")
    year: int | None = Field(default=None, description="Filter by release year")
    page: int | None = page_field()
    language: str | None = language_field()
    include_adult: bool | None = include_adult_field()
    region: str | None = region_field()


class SearchTvParams(ToolParameters):
    """Parameters for search_tmdb_tv."""

    query: str = Field(description="Search query for TV shows")
    page: int | None = page_field()
    language: str | None = language_field()
    first_air_date_year: int | None = Field(
        default=None, description="Filter by first air date year"
    )
    include_adult: bool | None = include_adult_field()


class SearchPersonParams(ToolParameters):
    """Parameters for search_tmdb_person."""

    query: str = Field(description="Search query for people")
    page: int | None = page_field()
    language: str | None = language_field()
    include_adult: bool | None = include_adult_field()
    region: str | None = region_field()


async def _normalized_search(
    client: SupportsFetch, path: str, params: dict[str, Any]
) -> ToolResult:
    data = await client.fetch(path, params)
    return ToolResult.from_payload(normalize_search_page(data or {}))


def search_keywords_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the search_keywords tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = SearchKeywordsParams.model_validate(raw_params)
        return await fetch_result(
            client, "/search/keyword", {"query": params.query, "page": params.page}
        )

    return ToolDefinition(
        name="search_keywords",
        description=(
            "Searches TMDB keywords (tags) by text. Input: query (required search "
            "string), page (optional page number). Output: JSON with paginated "
            "keyword results. Use it to find keyword IDs for discover filters."
        ),
        parameters_model=SearchKeywordsParams,
        handler=handler,
    )


def search_tmdb_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the search_tmdb multi-type search tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        query = raw_params.get("query")
        if not query or not isinstance(query, str):
            raise InvalidInputError("query must be a non-empty string")
        params = SearchMultiParams.model_validate(raw_params)
        return await _normalized_search(
            client,
            "/search/multi",
            {
                "query": params.query,
                "page": params.page,
                "language": params.language,
                "include_adult": params.include_adult,
                "region": params.region,
            },
        )

    return ToolDefinition(
        name="search_tmdb",
        description=(
            "Searches TMDB for movies, TV shows and people at once. Input: query "
            "(required search string), page (optional 1-1000), language (optional "
            "ISO 639-1), include_adult (optional boolean), region (optional "
            "ISO 3166-1). Output: JSON {page, total_pages, total_results, results} "
            "where each result is normalized to id, media_type, title, date, "
            "original_language, popularity, vote_average and overview."
        ),
        parameters_model=SearchMultiParams,
        handler=handler,
    )


def search_tmdb_movies_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the search_tmdb_movies tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = SearchMoviesParams.model_validate(raw_params)
        return await _normalized_search(
            client,
            "/search/movie",
            {
                "query": params.query,
                "year": params.year,
                "page": params.page,
                "language": params.language,
                "include_adult": params.include_adult,
                "region": params.region,
            },
        )

    return ToolDefinition(
        name="search_tmdb_movies",
        description=(
            "Searches TMDB for movies only. Input: query (required search string), "
            "year (optional release year), page (optional), language (optional "
            "ISO 639-1), include_adult (optional boolean), region (optional "
            "ISO 3166-1). Output: JSON with paginated normalized results."
        ),
        parameters_model=SearchMoviesParams,
        handler=handler,
    )


def search_tmdb_tv_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the search_tmdb_tv tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = SearchTvParams.model_validate(raw_params)
        return await _normalized_search(
            client,
            "/search/tv",
            {
                "query": params.query,
                "page": params.page,
                "language": params.language,
                "first_air_date_year": params.first_air_date_year,
                "include_adult": params.include_adult,
            },
        )

    return ToolDefinition(
        name="search_tmdb_tv",
        description=(
            "Searches TMDB for TV shows only. Input: query (required search "
            "string), page (optional), language (optional ISO 639-1), "
            "first_air_date_year (optional year), include_adult (optional "
            "boolean). Output: JSON with paginated normalized results."
        ),
        parameters_model=SearchTvParams,
        handler=handler,
    )


def search_tmdb_person_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the search_tmdb_person tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = SearchPersonParams.model_validate(raw_params)
        return await fetch_result(
            client,
            "/search/person",
            {
                "query": params.query,
                "page": params.page,
                "language": params.language,
                "include_adult": params.include_adult,
                "region": params.region,
            },
        )

    return ToolDefinition(
        name="search_tmdb_person",
        description=(
            "Searches TMDB for people (actors, directors, crew). Input: query "
            "(required search string), page (optional), language (optional "
            "ISO 639-1), include_adult (optional boolean), region (optional "
            "ISO 3166-1). Output: JSON with paginated person results including "
            "known_for credits."
        ),
        parameters_model=SearchPersonParams,
        handler=handler,
    )
