# TMDB v3 client (httpx). Every call carries the bearer header from settings.
from __future__ import annotations

from typing import Any, Dict, Literal

import httpx

from mediagate.clients.upstream import client_options, get_json
from mediagate.core.config import settings

MediaType = Literal["movie", "tv"]

LANGUAGE = "en-US"

# fixed for every search request
SEARCH_PARAMS: Dict[str, Any] = {
    "include_adult": "false",
    "language": LANGUAGE,
    "page": 1,
}


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        **client_options(settings.tmdb_base_url, settings.tmdb_headers, settings.upstream_timeout_sec)
    )


async def _get(path: str, params: Dict[str, Any] | None = None) -> Dict[str, Any]:
    async with _client() as client:
        return await get_json(client, path, params=params)


async def fetch_trending(media_type: MediaType, time_window: str) -> Dict[str, Any]:
    """GET /trending/{movie|tv}/{day|week}"""
    return await _get(f"/trending/{media_type}/{time_window}", {"language": LANGUAGE})


async def fetch_popular_movies() -> Dict[str, Any]:
    return await _get("/movie/popular", {"language": LANGUAGE, "page": 1})


async def fetch_upcoming_movies() -> Dict[str, Any]:
    return await _get("/movie/upcoming", {"language": LANGUAGE, "page": 1})


async def fetch_top_rated_tv(page: int = 1) -> Dict[str, Any]:
    return await _get("/tv/top_rated", {"language": LANGUAGE, "page": page})


async def search(media_type: MediaType, query: str | None) -> Dict[str, Any]:
    """
    GET /search/{movie|tv}. The query parameter is always sent, empty when the
    caller gave none.
    """
    return await _get(f"/search/{media_type}", {**SEARCH_PARAMS, "query": query or ""})


async def fetch_images(media_type: MediaType, media_id: str) -> Dict[str, Any]:
    """GET /{movie|tv}/{id}/images -> {"backdrops": [...], "posters": [...], ...}"""
    return await _get(f"/{media_type}/{media_id}/images")
