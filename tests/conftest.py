"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from tmdb_mcp_server.config import TmdbSettings
from tmdb_mcp_server.diagnostics import DiagnosticsSink, Severity


class FakeTmdb:
    """Stand-in for the upstream client that records every fetch."""

    def __init__(self, responses: Mapping[str, Any] | None = None) -> None:
        self.responses: dict[str, Any] = dict(responses or {})
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def fetch(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        self.calls.append((path, dict(params or {})))
        response = self.responses.get(path, {})
        if isinstance(response, Exception):
            raise response
        return response


class RecordingDiagnostics(DiagnosticsSink):
    """Diagnostics sink that keeps every notification in memory."""

    def __init__(self) -> None:
        self.messages: list[tuple[Severity, str]] = []

    def notify(self, level: Severity, message: str) -> None:
        self.messages.append((level, message))

    def levels(self) -> list[str]:
        return [level for level, _ in self.messages]


@pytest.fixture()
def fake_tmdb() -> FakeTmdb:
    """Provide an upstream double with no canned responses."""
    return FakeTmdb()


@pytest.fixture()
def diagnostics() -> RecordingDiagnostics:
    """Provide a recording diagnostics sink."""
    return RecordingDiagnostics()


@pytest.fixture()
def settings() -> TmdbSettings:
    """Provide settings that do not depend on the environment."""
    return TmdbSettings(auth_token="test-token", _env_file=None)


@pytest.fixture()
def search_multi_payload() -> dict[str, Any]:
    """Provide a small /search/multi response mixing media types."""
    return {
        "page": 1,
        "total_pages": 1,
        "total_results": 3,
        "results": [
            {
                "id": 123,
                "media_type": "movie",
                "title": "Dune",
                "release_date": "2021-10-22",
                "original_language": "en",
                "popularity": 88.1,
                "vote_average": 7.8,
                "overview": "Paul Atreides arrives on Arrakis.",
            },
            {
                "id": 456,
                "media_type": "tv",
                "name": "Dune: Prophecy",
                "first_air_date": "2024-11-17",
                "original_language": "en",
                "popularity": 40.0,
                "vote_average": 7.1,
                "overview": "The Bene Gesserit rise.",
            },
            {
                "id": 789,
                "media_type": "person",
                "name": "Denis Villeneuve",
                "popularity": 12.5,
            },
        ],
    }


@pytest.fixture()
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio, the event loop the server targets."""
    return "asyncio"
