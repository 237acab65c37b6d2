"""Discovery tools: filtered browsing and streaming availability.

TMDB's discover filters use dotted names such as ``release_date.gte``; those
fields are declared under Python names and exposed under their TMDB names as
aliases, which are also the names forwarded upstream.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from tmdb_mcp_server.client import SupportsFetch
from tmdb_mcp_server.tooling import ToolDefinition, ToolParameters, ToolResult
from tmdb_mcp_server.tools.common import fetch_result, page_field

Number = int | float


def _opt(description: str, alias: str | None = None) -> Any:
    return Field(default=None, alias=alias, description=description)


class WatchProvidersParams(ToolParameters):
    """Parameters for get_watch_providers."""

    type: Literal["movie", "tv"] = Field(
        description="Media type for providers endpoint"
    )
    language: str = Field(default="en", description="ISO 639-1 language (e.g., en)")
    watch_region: str = Field(description="ISO 3166-1 region code (e.g., IT)")


class DiscoverByProviderParams(ToolParameters):
    """Parameters for discover_by_provider."""

    type: Literal["tv", "movie"] = Field(
        default="tv", description="Media type to discover: tv (default) or movie"
    )
    with_watch_providers: str = Field(
        description=(
            "Provider ID(s), comma-separated (e.g., '8'), from get_watch_providers"
        )
    )
    watch_region: str = Field(description="ISO 3166-1 region code (e.g., IS)")
    language: str = Field(default="en", description="ISO 639-1 language (e.g., en)")
    page: int = Field(default=1, ge=1, description="Page number")
    sort_by: str = Field(
        default="release_date.desc",
        description=(
            "Sort order (e.g., release_date.desc, first_air_date.desc, "
            "popularity.desc)"
        ),
    )


class DiscoverMoviesParams(ToolParameters):
    """Parameters for discover_movies."""

    language: str | None = _opt("ISO 639-1 language (e.g., en-US)")
    region: str | None = _opt("ISO 3166-1 region (e.g., US)")
    sort_by: str | None = _opt(
        "Sort by (e.g., popularity.desc, release_date.desc, vote_average.desc, "
        "primary_release_date.desc, revenue.desc, original_title.asc)"
    )
    certification: str | None = _opt("Filter by certification (e.g., PG-13)")
    certification_gte: str | None = _opt(
        "Certification greater than or equal to", "certification.gte"
    )
    certification_lte: str | None = _opt(
        "Certification less than or equal to", "certification.lte"
    )
    certification_country: str | None = _opt("Certification country (ISO 3166-1)")
    include_adult: bool | None = _opt("Include adult titles (default false)")
    include_video: bool | None = _opt("Include items with videos")
    page: int | None = page_field("Page number (1-500)")
    primary_release_year: int | None = _opt("Primary release year")
    primary_release_date_gte: str | None = _opt(
        "Primary release date from (YYYY-MM-DD)", "primary_release_date.gte"
    )
    primary_release_date_lte: str | None = _opt(
        "Primary release date to (YYYY-MM-DD)", "primary_release_date.lte"
    )
    release_date_gte: str | None = _opt(
        "Release date from (YYYY-MM-DD)", "release_date.gte"
    )
    release_date_lte: str | None = _opt(
        "Release date to (YYYY-MM-DD)", "release_date.lte"
    )
    with_release_type: str | None = _opt(
        "Release types separated by comma (AND) or pipe (OR), e.g. 2|3"
    )
    with_original_language: str | None = _opt("Original language (ISO 639-1)")
    with_runtime_gte: Number | None = _opt("Runtime min (minutes)", "with_runtime.gte")
    with_runtime_lte: Number | None = _opt("Runtime max (minutes)", "with_runtime.lte")
    with_cast: str | None = _opt("Comma-separated person IDs")
    with_crew: str | None = _opt("Comma-separated person IDs")
    with_people: str | None = _opt("Comma-separated person IDs")
    with_companies: str | None = _opt("Comma-separated company IDs")
    with_genres: str | None = _opt("Comma-separated genre IDs")
    without_genres: str | None = _opt("Comma-separated genre IDs to exclude")
    with_keywords: str | None = _opt("Comma-separated keyword IDs")
    without_keywords: str | None = _opt("Comma-separated keyword IDs to exclude")
    with_watch_providers: str | None = _opt("Comma-separated watch provider IDs")
    watch_region: str | None = _opt("ISO 3166-1 region for watch providers")
    with_watch_monetization_types: str | None = _opt(
        "Comma-separated monetization types (flatrate|free|ads|rent|buy)"
    )
    vote_count_gte: Number | None = _opt("Minimum vote count", "vote_count.gte")
    vote_count_lte: Number | None = _opt("Maximum vote count", "vote_count.lte")
    vote_average_gte: float | None = _opt(
        "Minimum vote average (0-10)", "vote_average.gte"
    )
    vote_average_lte: float | None = _opt(
        "Maximum vote average (0-10)", "vote_average.lte"
    )
    with_release_type_gte: Number | None = _opt(
        "Min release type mask (advanced)", "with_release_type.gte"
    )
    with_release_type_lte: Number | None = _opt(
        "Max release type mask (advanced)", "with_release_type.lte"
    )
    with_status: str | None = _opt(
        "Comma-separated status (Rumored|Planned|In Production|Post Production|"
        "Released|Canceled)"
    )
    with_type: str | None = _opt("Comma-separated movie types (Documentary, etc.)")
    without_companies: str | None = _opt("Comma-separated company IDs to exclude")
    screened_theatrically: bool | None = _opt(
        "Filter for movies screened theatrically"
    )


class DiscoverTvParams(ToolParameters):
    """Parameters for discover_tv."""

    language: str | None = _opt("ISO 639-1 language (e.g., en-US)")
    sort_by: str | None = _opt(
        "Sort by (e.g., popularity.desc, first_air_date.desc, vote_average.desc)"
    )
    air_date_gte: str | None = _opt("Air date from (YYYY-MM-DD)", "air_date.gte")
    air_date_lte: str | None = _opt("Air date to (YYYY-MM-DD)", "air_date.lte")
    first_air_date_gte: str | None = _opt(
        "First air date from (YYYY-MM-DD)", "first_air_date.gte"
    )
    first_air_date_lte: str | None = _opt(
        "First air date to (YYYY-MM-DD)", "first_air_date.lte"
    )
    first_air_date_year: int | None = _opt("First air date year")
    page: int | None = page_field("Page number (1-500)")
    timezone: str | None = _opt(
        "Timezone for air date lookups (e.g., America/New_York)"
    )
    with_runtime_gte: Number | None = _opt("Runtime min (minutes)", "with_runtime.gte")
    with_runtime_lte: Number | None = _opt("Runtime max (minutes)", "with_runtime.lte")
    include_null_first_air_dates: bool | None = _opt(
        "Include shows with null first air dates"
    )
    with_original_language: str | None = _opt("Original language (ISO 639-1)")
    without_genres: str | None = _opt("Comma-separated genre IDs to exclude")
    with_genres: str | None = _opt("Comma-separated genre IDs")
    with_networks: str | None = _opt("Comma-separated network IDs")
    with_companies: str | None = _opt("Comma-separated company IDs")
    with_keywords: str | None = _opt("Comma-separated keyword IDs")
    without_keywords: str | None = _opt("Comma-separated keyword IDs to exclude")
    screened_theatrically: bool | None = _opt(
        "Only meaningful for movies; accepted and forwarded unchanged"
    )
    with_status: str | None = _opt(
        "Comma-separated production status (Returning Series|Planned|"
        "In Production|Ended|Canceled|Pilot)"
    )
    with_type: str | None = _opt("Comma-separated TV types (e.g., Documentary, News)")
    vote_average_gte: float | None = _opt("Minimum vote average", "vote_average.gte")
    vote_average_lte: float | None = _opt("Maximum vote average", "vote_average.lte")
    vote_count_gte: Number | None = _opt("Minimum vote count", "vote_count.gte")
    vote_count_lte: Number | None = _opt("Maximum vote count", "vote_count.lte")
    with_watch_providers: str | None = _opt("Comma-separated watch provider IDs")
    watch_region: str | None = _opt("ISO 3166-1 region for watch providers")
    with_watch_monetization_types: str | None = _opt(
        "Comma-separated monetization types (flatrate|free|ads|rent|buy)"
    )
    with_name_translation: str | None = _opt(
        "ISO 639-1 language to filter by available translations"
    )
    with_overview_translation: str | None = _opt(
        "ISO 639-1 language to filter overview translations"
    )


def get_watch_providers_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the get_watch_providers tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = WatchProvidersParams.model_validate(raw_params)
        return await fetch_result(
            client,
            f"/watch/providers/{params.type}",
            {"language": params.language, "watch_region": params.watch_region},
        )

    return ToolDefinition(
        name="get_watch_providers",
        description=(
            "Lists the streaming services available for movies or TV in a region. "
            "Input: type (required: movie|tv), watch_region (required ISO 3166-1), "
            "language (optional ISO 639-1, default en). Output: JSON with the "
            "providers and their IDs, usable with discover_by_provider."
        ),
        parameters_model=WatchProvidersParams,
        handler=handler,
    )


def discover_by_provider_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the discover_by_provider tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = DiscoverByProviderParams.model_validate(raw_params)
        return await fetch_result(
            client,
            f"/discover/{params.type}",
            {
                "language": params.language,
                "page": params.page,
                "with_watch_providers": params.with_watch_providers,
                "sort_by": params.sort_by,
                "watch_region": params.watch_region,
            },
        )

    return ToolDefinition(
        name="discover_by_provider",
        description=(
            "Discovers movies or TV shows available on given streaming providers "
            "in a region. Input: type (optional: tv|movie, default tv), "
            "with_watch_providers (required comma-separated provider IDs), "
            "watch_region (required ISO 3166-1), language (optional, default en), "
            "page (optional, default 1), sort_by (optional, default "
            "release_date.desc). Output: JSON with paginated results."
        ),
        parameters_model=DiscoverByProviderParams,
        handler=handler,
    )


def discover_movies_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the discover_movies tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = DiscoverMoviesParams.model_validate(raw_params)
        return await fetch_result(
            client, "/discover/movie", params.model_dump(by_alias=True)
        )

    return ToolDefinition(
        name="discover_movies",
        description=(
            "Discovers movies with TMDB's full filter set. Input: optional filters "
            "including language, region, sort_by, certifications, release dates, "
            "genres, keywords, cast/crew, companies, runtime, watch providers and "
            "vote ranges; range filters use TMDB's dotted names (e.g., "
            "release_date.gte). Output: JSON with paginated results."
        ),
        parameters_model=DiscoverMoviesParams,
        handler=handler,
    )


def discover_tv_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the discover_tv tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = DiscoverTvParams.model_validate(raw_params)
        return await fetch_result(
            client, "/discover/tv", params.model_dump(by_alias=True)
        )

    return ToolDefinition(
        name="discover_tv",
        description=(
            "Discovers TV shows with TMDB's full filter set. Input: optional "
            "filters including language, sort_by, air dates, genres, networks, "
            "companies, keywords, runtime, status, watch providers and vote "
            "ranges; range filters use TMDB's dotted names (e.g., "
            "first_air_date.gte). Output: JSON with paginated results."
        ),
        parameters_model=DiscoverTvParams,
        handler=handler,
    )
