"""HTTP client for the TMDB API behind the authenticated proxy."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from tmdb_mcp_server.config import TmdbSettings
from tmdb_mcp_server.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


class SupportsFetch(Protocol):
    """Anything able to perform one upstream GET and return parsed JSON."""

    async def fetch(
        self, path: str, params: Mapping[str, Any] | None = None
    ) -> Any:  # pragma: no cover - protocol
        ...


def clean_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop parameters whose value is ``None`` or an empty string."""
    if not params:
        return {}
    return {
        key: value
        for key, value in params.items()
        if value is not None and not (isinstance(value, str) and value == "")
    }


class TmdbClient:
    """Thin asynchronous client for the TMDB v3 API."""

    def __init__(
        self,
        settings: TmdbSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = settings.base_url.rstrip("/")
        self._token = settings.auth_token.get_secret_value().strip()
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=settings.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def _headers(self) -> dict[str, str]:
        if not self._token:
            raise ConfigurationError("TMDB authorization token is not configured")
        if self._token.lower().startswith("bearer "):
            return {"Authorization": self._token}
        return {"Authorization": f"Bearer {self._token}"}

    async def fetch(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET ``path`` with ``params`` and return the decoded JSON body.

        Raises:
            ConfigurationError: If no credential is configured.
            UpstreamError: If TMDB answers with a non-success status.
            httpx.HTTPError: On transport failures.

        """
        headers = self._headers()
        query = clean_params(params)
        logger.debug("GET %s%s params=%s", self.base_url, path, query)
        resp = await self._http.get(path, params=query, headers=headers)
        if not resp.is_success:
            logger.debug("GET %s failed with status %s", path, resp.status_code)
            raise UpstreamError(resp.status_code, resp.text)
        return resp.json()

    async def aclose(self) -> None:
        """Release pooled connections."""
        await self._http.aclose()
