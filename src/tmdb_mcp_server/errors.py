"""Custom error types for the TMDB MCP server."""

from __future__ import annotations

from typing import TypedDict


class MCPErrorPayload(TypedDict):
    """Structured JSON payload for MCP errors."""

    error: dict[str, object | None]


class MCPError(Exception):
    """Structured MCP error containing a JSON-friendly payload."""

    def __init__(
        self, error_type: str, message: str, details: object | None = None
    ) -> None:
        """Create a structured MCP error payload."""
        super().__init__(message)
        self.message = message
        self.error: MCPErrorPayload = {
            "error": {
                "type": error_type,
                "message": message,
                "details": details,
            }
        }

    @property
    def error_type(self) -> str:
        """Return the error type label."""
        return str(self.error["error"]["type"])

    def to_dict(self) -> MCPErrorPayload:
        """Return the structured error payload."""
        return self.error


class ConfigurationError(MCPError):
    """Raised when the server is started without a usable configuration."""

    def __init__(self, message: str, details: object | None = None) -> None:
        """Create a configuration error."""
        super().__init__("ConfigurationError", message, details)


class UnknownToolError(MCPError):
    """Raised when a call names a tool that is not registered."""

    def __init__(self, name: str) -> None:
        """Create an unknown-tool error for ``name``."""
        super().__init__("UnknownTool", f"Unknown tool: {name}")
        self.name = name


class InvalidInputError(MCPError):
    """Raised when tool arguments do not satisfy the tool's contract."""

    def __init__(self, message: str, details: object | None = None) -> None:
        """Create an input validation error."""
        super().__init__("InvalidInput", message, details)


class UpstreamError(MCPError):
    """Raised when the TMDB API answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        """Create an upstream error carrying the HTTP status and body text."""
        super().__init__(
            "UpstreamError",
            f"TMDB request failed {status_code}: {body}",
            {"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body
