"""Server configuration using pydantic-settings."""

from __future__ import annotations

from typing import Any

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tmdb_mcp_server.errors import ConfigurationError

DEFAULT_BASE_URL = "https://production-api.tnl.one/service/tmdb/3"


class TmdbSettings(BaseSettings):
    """Configuration for the TMDB MCP server.

    Settings are read once at startup from environment variables with the
    ``TMDB_`` prefix (or a local ``.env`` file) and passed explicitly to the
    upstream client.
    """

    model_config = SettingsConfigDict(
        env_prefix="TMDB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    auth_token: SecretStr = Field(
        description="Bearer token for the TMDB proxy (TMDB_AUTH_TOKEN)",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Proxy origin plus the TMDB API version prefix",
    )
    timeout: float = Field(
        default=30.0, gt=0, description="Upstream request timeout in seconds"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("auth_token")
    @classmethod
    def _require_token(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("auth_token must not be empty")
        return value


def load_settings(**overrides: Any) -> TmdbSettings:
    """Load settings, converting validation failures to a configuration error.

    Raises:
        ConfigurationError: If the credential is missing or a value is invalid.

    """
    try:
        return TmdbSettings(**overrides)
    except ValidationError as error:
        missing = [
            str(issue["loc"][0]) for issue in error.errors() if issue["loc"]
        ]
        if "auth_token" in missing:
            raise ConfigurationError(
                "TMDB_AUTH_TOKEN environment variable is not set. "
                "Set it to the TMDB proxy bearer token.",
                details=str(error),
            ) from error
        raise ConfigurationError("Invalid TMDB configuration", str(error)) from error
