"""Shared helpers for TMDB tools."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import Field

from tmdb_mcp_server.client import SupportsFetch
from tmdb_mcp_server.tooling import ToolResult

TimeWindow = Literal["day", "week"]


def page_field(description: str = "Page number") -> Any:
    """Optional page number, 1 or greater."""
    return Field(default=None, ge=1, description=description)


def language_field(description: str = "ISO 639-1 code (e.g., en-US)") -> Any:
    """Optional response language."""
    return Field(default=None, description=description)


def region_field(description: str = "ISO 3166-1 region code (e.g., US)") -> Any:
    """Optional region filter."""
    return Field(default=None, description=description)


def include_adult_field() -> Any:
    """Optional adult-content switch."""
    return Field(default=None, description="Include adult results")


async def fetch_result(
    client: SupportsFetch, path: str, params: Mapping[str, Any] | None = None
) -> ToolResult:
    """Fetch ``path`` and return the raw JSON as a tool result."""
    data = await client.fetch(path, params)
    return ToolResult.from_payload(data)
