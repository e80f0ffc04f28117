from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from mediagate import schemas as s
from mediagate.api.errors import handle_error, invalid_time_window
from mediagate.clients import tmdb
from mediagate.core.config import settings
from mediagate.core.logging_utils import create_logger
from mediagate.services.projection import (
    popular_tv_out_of_range,
    popular_tv_page,
    prefix_all,
    project,
    project_images,
)

router = APIRouter(tags=["tv"])
logger = create_logger("tv")


@router.get("/trending/tv")
@router.get("/trending/tv/", include_in_schema=False)
async def trending_tv_default():
    return await trending_tv("week")


@router.get("/trending/tv/{time_window}")
async def trending_tv(time_window: str):
    bad = invalid_time_window(time_window)
    if bad is not None:
        return bad
    try:
        payload = await tmdb.fetch_trending("tv", time_window)
        out = prefix_all(payload["results"], settings.tmdb_image_base_url)
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched trending TV shows", time_window=time_window, count=len(out))
    return out


@router.get("/popular/tv", response_model=s.PopularTvPage)
async def popular_tv(page: int = Query(1, description="upstream page, 1-based")):
    """
    Top-rated shows, one upstream page at a time. Asking past the last page
    is answered with a 404 envelope rather than an error.
    """
    try:
        payload = await tmdb.fetch_top_rated_tv(page)
        total_pages = payload.get("total_pages")
        if total_pages is not None and page > total_pages:
            logger.info("Requested popular TV page out of range", page=page, total_pages=total_pages)
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content=popular_tv_out_of_range(page, payload),
            )
        out = popular_tv_page(payload, settings.tmdb_image_base_url)
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched popular TV shows", page=page, count=len(out.popular_tv_shows))
    return out


@router.get("/search/tv", response_model=list[s.TvSummary])
async def search_tv(query: Optional[str] = Query(None)):
    try:
        payload = await tmdb.search("tv", query)
        out = project(payload["results"], s.TvSummary, settings.tmdb_image_base_url)
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched TV shows for query", query=query, count=len(out))
    return out


@router.get("/images/tv/{tv_id}", response_model=s.MediaImages)
async def tv_images(tv_id: str):
    try:
        payload = await tmdb.fetch_images("tv", tv_id)
        out = project_images(payload, settings.tmdb_image_base_url)
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched images for TV show", tv_id=tv_id)
    return out
