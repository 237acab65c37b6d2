"""Movie sub-resource tools: lists, images, reviews and credits."""

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


class MovieParams(ToolParameters):
    """Parameters that only identify a movie."""

    movie_id: int = Field(description="TMDB Movie ID")
    language: str | None = language_field()


class MovieListsParams(MovieParams):
    """Parameters for movie_lists."""

    page: int | None = page_field()


class MovieImagesParams(MovieParams):
    """Parameters for movie_images."""

    include_image_language: str | None = Field(
        default=None,
        description=(
            "Filter image languages (comma-separated ISO 639-1 codes or 'null')"
        ),
    )


class MovieReviewsParams(MovieParams):
    """Parameters for movie_reviews."""

    page: int | None = page_field()
    region: str | None = region_field()


def movie_lists_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the movie_lists tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = MovieListsParams.model_validate(raw_params)
        return await fetch_result(
            client,
            f"/movie/{params.movie_id}/lists",
            {"language": params.language, "page": params.page},
        )

    return ToolDefinition(
        name="movie_lists",
        description=(
            "Retrieves user lists and collections that contain a movie. Input: "
            "movie_id (required TMDB ID), language (optional ISO 639-1), page "
            "(optional). Output: JSON with paginated lists."
        ),
        parameters_model=MovieListsParams,
        handler=handler,
    )


def movie_images_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the movie_images tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = MovieImagesParams.model_validate(raw_params)
        return await fetch_result(
            client,
            f"/movie/{params.movie_id}/images",
            {
                "language": params.language,
                "include_image_language": params.include_image_language,
            },
        )

    return ToolDefinition(
        name="movie_images",
        description=(
            "Fetches posters, backdrops and logos of a movie. Input: movie_id "
            "(required TMDB ID), language (optional ISO 639-1), "
            "include_image_language (optional comma-separated languages). "
            "Output: JSON with backdrops, posters and logos arrays."
        ),
        parameters_model=MovieImagesParams,
        handler=handler,
    )


def movie_reviews_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the movie_reviews tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = MovieReviewsParams.model_validate(raw_params)
        return await fetch_result(
            client,
            f"/movie/{params.movie_id}/reviews",
            {
                "language": params.language,
                "page": params.page,
                "region": params.region,
            },
        )

    return ToolDefinition(
        name="movie_reviews",
        description=(
            "Retrieves user reviews of a movie. Input: movie_id (required TMDB "
            "ID), language (optional ISO 639-1), page (optional), region "
            "(optional ISO 3166-1). Output: JSON with paginated reviews."
        ),
        parameters_model=MovieReviewsParams,
        handler=handler,
    )


def movie_credits_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the movie_credits tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = MovieParams.model_validate(raw_params)
        return await fetch_result(
            client, f"/movie/{params.movie_id}/credits", {"language": params.language}
        )

    return ToolDefinition(
        name="movie_credits",
        description=(
            "Fetches the cast and crew of a movie. Input: movie_id (required TMDB "
            "ID), language (optional ISO 639-1). Output: JSON with cast and crew "
            "arrays."
        ),
        parameters_model=MovieParams,
        handler=handler,
    )
