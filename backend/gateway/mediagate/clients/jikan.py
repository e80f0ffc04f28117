# Jikan v4 client (httpx). Unauthenticated.
from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

import httpx

from mediagate.clients.upstream import client_options, get_json
from mediagate.core.config import settings


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        **client_options(settings.jikan_base_url, settings.jikan_headers, settings.upstream_timeout_sec)
    )


async def _list(path: str) -> List[Dict[str, Any]]:
    async with _client() as client:
        body = await get_json(client, path)
        return body["data"]


async def fetch_current_season() -> List[Dict[str, Any]]:
    return await _list("/seasons/now")


async def fetch_upcoming_season() -> List[Dict[str, Any]]:
    return await _list("/seasons/upcoming")


async def fetch_top_anime() -> List[Dict[str, Any]]:
    return await _list("/top/anime")


async def fetch_anime_bundle(anime_id: str) -> Tuple[Dict[str, Any], List[Dict[str, Any]], Dict[str, Any]]:
    """
    Three sequential calls on one connection:
      /anime/{id}           -> full detail body ({"data": {...}})
      /anime/{id}/pictures  -> list of {jpg: {...}, webp: {...}}
      /anime/{id}/videos    -> {promo, episodes, music_videos}
    Any failure aborts the lot.
    """
    async with _client() as client:
        detail = await get_json(client, f"/anime/{anime_id}")
        pictures = await get_json(client, f"/anime/{anime_id}/pictures")
        videos = await get_json(client, f"/anime/{anime_id}/videos")
    return detail, pictures["data"], videos["data"]


async def search_anime(params: Sequence[Tuple[str, str]]) -> Any:
    """GET /anime with the caller's query string forwarded as-is."""
    async with _client() as client:
        return await get_json(client, "/anime", params=list(params) or None)
