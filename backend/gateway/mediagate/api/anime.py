from __future__ import annotations

from fastapi import APIRouter, Request

from mediagate import schemas as s
from mediagate.api.errors import handle_error
from mediagate.clients import jikan
from mediagate.core.logging_utils import create_logger
from mediagate.services.projection import attach_anime_extras, summarize_anime_list

router = APIRouter(tags=["anime"])
logger = create_logger("anime")


# --- seasonal / ranked lists -------------------------------------------------
@router.get("/trending/anime", response_model=list[s.AnimeSummary])
async def trending_anime():
    try:
        out = summarize_anime_list(await jikan.fetch_current_season())
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched trending animes", count=len(out))
    return out


@router.get("/popular/anime", response_model=list[s.AnimeSummary])
async def popular_anime():
    try:
        out = summarize_anime_list(await jikan.fetch_top_anime())
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched popular animes", count=len(out))
    return out


@router.get("/upcoming/anime", response_model=list[s.AnimeSummary])
async def upcoming_anime():
    try:
        out = summarize_anime_list(await jikan.fetch_upcoming_season())
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched upcoming animes", count=len(out))
    return out


# --- search ------------------------------------------------------------------
@router.get("/search/anime/{anime_id}")
async def search_anime_by_id(anime_id: str):
    """
    Full Jikan detail body, plus:
      images_data: {"jpgs": [...], "webp": [...]} built from /pictures
      videos:      the /videos payload
    """
    try:
        detail, pictures, videos = await jikan.fetch_anime_bundle(anime_id)
        out = attach_anime_extras(detail, pictures, videos)
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched anime for ID", anime_id=anime_id)
    return out


@router.get("/search/anime")
async def search_anime(request: Request):
    # every query param goes upstream untouched
    params = request.query_params.multi_items()
    try:
        out = await jikan.search_anime(params)
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched anime for query(s)", params=str(request.query_params))
    return out
