"""Model Context Protocol server for The Movie Database (TMDB)."""

from tmdb_mcp_server.client import TmdbClient
from tmdb_mcp_server.config import TmdbSettings, load_settings
from tmdb_mcp_server.errors import (
    ConfigurationError,
    InvalidInputError,
    MCPError,
    UnknownToolError,
    UpstreamError,
)
from tmdb_mcp_server.server import MCPServer
from tmdb_mcp_server.tooling import ToolDefinition, ToolParameters, ToolResult

__all__ = [
    "ConfigurationError",
    "InvalidInputError",
    "MCPError",
    "MCPServer",
    "TmdbClient",
    "TmdbSettings",
    "ToolDefinition",
    "ToolParameters",
    "ToolResult",
    "UnknownToolError",
    "UpstreamError",
    "load_settings",
]
