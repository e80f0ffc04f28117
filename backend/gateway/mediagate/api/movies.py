from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query

from mediagate import schemas as s
from mediagate.api.errors import handle_error, invalid_time_window
from mediagate.clients import tmdb
from mediagate.core.config import settings
from mediagate.core.logging_utils import create_logger
from mediagate.services.projection import prefix_all, project, project_images

router = APIRouter(tags=["movies"])
logger = create_logger("movies")


# --- trending ----------------------------------------------------------------
@router.get("/trending/movies")
@router.get("/trending/movies/", include_in_schema=False)
async def trending_movies_default():
    return await trending_movies("week")


@router.get("/trending/movies/{time_window}")
async def trending_movies(time_window: str):
    """Full upstream list; only the image paths are rewritten."""
    bad = invalid_time_window(time_window)
    if bad is not None:
        return bad
    try:
        payload = await tmdb.fetch_trending("movie", time_window)
        out = prefix_all(payload["results"], settings.tmdb_image_base_url)
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched trending movies", time_window=time_window, count=len(out))
    return out


# --- lists -------------------------------------------------------------------
@router.get("/popular/movies", response_model=list[s.MovieSummary])
async def popular_movies():
    try:
        payload = await tmdb.fetch_popular_movies()
        out = project(payload["results"], s.MovieSummary, settings.tmdb_image_base_url)
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched popular movies", count=len(out))
    return out


@router.get("/upcoming/movies", response_model=list[s.MovieSummary])
async def upcoming_movies():
    try:
        payload = await tmdb.fetch_upcoming_movies()
        out = project(payload["results"], s.MovieSummary, settings.tmdb_image_base_url)
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched upcoming movies", count=len(out))
    return out


@router.get("/search/movies", response_model=list[s.MovieSummary])
async def search_movies(query: Optional[str] = Query(None)):
    try:
        payload = await tmdb.search("movie", query)
        out = project(payload["results"], s.MovieSummary, settings.tmdb_image_base_url)
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched movies for query", query=query, count=len(out))
    return out


# --- images ------------------------------------------------------------------
@router.get("/images/movie/{movie_id}", response_model=s.MediaImages)
async def movie_images(movie_id: str):
    try:
        payload = await tmdb.fetch_images("movie", movie_id)
        out = project_images(payload, settings.tmdb_image_base_url)
    except Exception as e:
        return handle_error(e)

    logger.info("Successfully fetched images for movie", movie_id=movie_id)
    return out
