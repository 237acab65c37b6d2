"""Detail lookups for a single movie, TV show or person."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from tmdb_mcp_server.client import SupportsFetch
from tmdb_mcp_server.tooling import ToolDefinition, ToolParameters, ToolResult
from tmdb_mcp_server.tools.common import fetch_result, language_field


class DetailsParams(ToolParameters):
    """Parameters for get_tmdb_details."""

    type: Literal["movie", "tv", "person"] = Field(description="The TMDB media type")
    id: int = Field(description="TMDB ID")
    language: str | None = language_field()
    append: str | None = Field(
        default=None,
        description="Comma-separated append_to_response (e.g., credits,images)",
    )


class PersonDetailsParams(ToolParameters):
    """Parameters for person_details."""

    person_id: int = Field(description="TMDB Person ID")
    language: str | None = language_field()
    append: str | None = Field(
        default=None,
        description=(
            "Comma-separated append_to_response "
            "(e.g., images,combined_credits,external_ids)"
        ),
    )


def get_tmdb_details_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the get_tmdb_details tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = DetailsParams.model_validate(raw_params)
        return await fetch_result(
            client,
            f"/{params.type}/{params.id}",
            {"language": params.language, "append_to_response": params.append},
        )

    return ToolDefinition(
        name="get_tmdb_details",
        description=(
            "Fetches full details of a movie, TV show or person. Input: type "
            "(required: movie|tv|person), id (required TMDB ID), language "
            "(optional ISO 639-1), append (optional comma-separated extras such "
            "as credits,images). Output: JSON with the item details and any "
            "appended data."
        ),
        parameters_model=DetailsParams,
        handler=handler,
    )


def person_details_tool(client: SupportsFetch) -> ToolDefinition:
    """Create the person_details tool."""

    async def handler(raw_params: dict[str, Any]) -> ToolResult:
        params = PersonDetailsParams.model_validate(raw_params)
        return await fetch_result(
            client,
            f"/person/{params.person_id}",
            {"language": params.language, "append_to_response": params.append},
        )

    return ToolDefinition(
        name="person_details",
        description=(
            "Retrieves the profile of a person (actor, director, crew member). "
            "Input: person_id (required TMDB ID), language (optional ISO 639-1), "
            "append (optional comma-separated extras such as images,"
            "combined_credits,external_ids). Output: JSON with biography, "
            "birth/death information and appended data."
        ),
        parameters_model=PersonDetailsParams,
        handler=handler,
    )
