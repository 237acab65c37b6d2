"""Tool registration helpers for the TMDB MCP server."""

from __future__ import annotations

from tmdb_mcp_server.client import SupportsFetch
from tmdb_mcp_server.tooling import ToolDefinition
from tmdb_mcp_server.tools.details import get_tmdb_details_tool, person_details_tool
from tmdb_mcp_server.tools.discover import (
    discover_by_provider_tool,
    discover_movies_tool,
    discover_tv_tool,
    get_watch_providers_tool,
)
from tmdb_mcp_server.tools.movies import (
    movie_credits_tool,
    movie_images_tool,
    movie_lists_tool,
    movie_reviews_tool,
)
from tmdb_mcp_server.tools.search import (
    search_keywords_tool,
    search_tmdb_movies_tool,
    search_tmdb_person_tool,
    search_tmdb_tool,
    search_tmdb_tv_tool,
)
from tmdb_mcp_server.tools.trending import (
    trending_all_tool,
    trending_movies_tool,
    trending_people_tool,
    trending_tv_tool,
)
from tmdb_mcp_server.tools.tv import (
    tv_airing_today_tool,
    tv_credits_tool,
    tv_popular_tool,
    tv_top_rated_tool,
)


def build_tools(client: SupportsFetch) -> list[ToolDefinition]:
    """Instantiate all tool definitions, in catalog order, around ``client``."""
    return [
        person_details_tool(client),
        movie_lists_tool(client),
        movie_images_tool(client),
        movie_reviews_tool(client),
        movie_credits_tool(client),
        search_keywords_tool(client),
        search_tmdb_tool(client),
        get_tmdb_details_tool(client),
        search_tmdb_movies_tool(client),
        search_tmdb_tv_tool(client),
        search_tmdb_person_tool(client),
        get_watch_providers_tool(client),
        discover_by_provider_tool(client),
        discover_movies_tool(client),
        discover_tv_tool(client),
        trending_all_tool(client),
        trending_movies_tool(client),
        trending_tv_tool(client),
        trending_people_tool(client),
        tv_top_rated_tool(client),
        tv_airing_today_tool(client),
        tv_popular_tool(client),
        tv_credits_tool(client),
    ]
