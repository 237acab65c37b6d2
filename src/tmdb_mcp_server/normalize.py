"""Normalization of heterogeneous TMDB search results.

TMDB search endpoints return movies, TV shows and people in the same
``results`` array, distinguished either by an explicit ``media_type`` or only
by which fields are present. This module folds every variant into one compact
:class:`SearchItem` shape.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Literal

InferredMediaType = Literal["movie", "tv", "unknown"]


@dataclass(frozen=True)
class SearchItem:
    """Compact, uniformly shaped search record."""

    id: Any
    media_type: str
    title: str
    date: str
    original_language: str | None = None
    popularity: float | None = None
    vote_average: float | None = None
    overview: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a JSON-serializable dictionary."""
        return asdict(self)


def infer_media_type(item: Mapping[str, Any]) -> InferredMediaType:
    """Infer the media type of an item from the fields it carries.

    Movies have a ``title``, TV shows a ``name``; anything else is unknown.
    """
    if item.get("title"):
        return "movie"
    if item.get("name"):
        return "tv"
    return "unknown"


def resolve_media_type(item: Mapping[str, Any]) -> str:
    """Return the upstream ``media_type`` if present, else the inferred one."""
    return item.get("media_type") or infer_media_type(item)


def normalize_search_item(item: Mapping[str, Any]) -> SearchItem:
    """Map one upstream search result onto a :class:`SearchItem`."""
    return SearchItem(
        id=item.get("id"),
        media_type=resolve_media_type(item),
        title=item.get("title") or item.get("name") or "",
        date=item.get("release_date") or item.get("first_air_date") or "",
        original_language=item.get("original_language"),
        popularity=item.get("popularity"),
        vote_average=item.get("vote_average"),
        overview=item.get("overview"),
    )


def normalize_search_page(data: Mapping[str, Any]) -> dict[str, Any]:
    """Wrap a paginated search response into the normalized envelope.

    ``results`` is empty when the upstream payload has no list of results.
    """
    raw_results = data.get("results")
    results = (
        [normalize_search_item(item).to_dict() for item in raw_results]
        if isinstance(raw_results, list)
        else []
    )
    return {
        "page": data.get("page"),
        "total_pages": data.get("total_pages"),
        "total_results": data.get("total_results"),
        "results": results,
    }
