from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

# The declared fields are the whitelist: anything else upstream sends is dropped.


# --- TMDB --------------------------------------------------------------------

class MovieSummary(BaseModel):
    id: Optional[int] = None
    original_language: Optional[str] = None
    original_title: Optional[str] = None
    title: Optional[str] = None
    overview: Optional[str] = None
    backdrop_path: Optional[str] = None
    poster_path: Optional[str] = None
    release_date: Optional[str] = None
    vote_average: Optional[float] = None


class TvSummary(BaseModel):
    id: Optional[int] = None
    original_language: Optional[str] = None
    original_name: Optional[str] = None
    name: Optional[str] = None
    overview: Optional[str] = None
    backdrop_path: Optional[str] = None
    poster_path: Optional[str] = None
    first_air_date: Optional[str] = None
    vote_average: Optional[float] = None


class ImageItem(BaseModel):
    aspect_ratio: Optional[float] = None
    height: Optional[int] = None
    width: Optional[int] = None
    file_path: Optional[str] = None


class MediaImages(BaseModel):
    backdrops: List[ImageItem] = []
    posters: List[ImageItem] = []


class Pagination(BaseModel):
    current_page: Optional[int] = None
    total_pages: Optional[int] = None
    total_results: Optional[int] = None


class PopularTvPage(BaseModel):
    pagination: Pagination
    popular_tv_shows: List[Dict[str, Any]]


# --- Jikan -------------------------------------------------------------------

class AnimeTrailer(BaseModel):
    yt_id: Optional[str] = None
    yt_url: Optional[str] = None
    embed_url: Optional[str] = None


class AnimeTitles(BaseModel):
    default_title: Optional[str] = None
    japanese_title: Optional[str] = None
    english_title: Optional[str] = None


class AnimeSummary(BaseModel):
    mal_id: Optional[int] = None
    mal_url: Optional[str] = None
    # [jpg, large jpg, trailer still]
    images: List[Optional[str]] = Field(default_factory=list)
    trailer: AnimeTrailer = Field(default_factory=AnimeTrailer)
    titles: AnimeTitles = Field(default_factory=AnimeTitles)
    episodes: Optional[int] = None
    rating: Optional[str] = None
    type: Optional[str] = None
    source: Optional[str] = None
    status: Optional[str] = None
    score: Optional[float] = None
    rank: Optional[int] = None
    popularity: Optional[int] = None
    synopsis: Optional[str] = None
    background: Optional[str] = None
    season: Optional[str] = None
    year: Optional[int] = None
    genres: List[str] = []
    themes: List[str] = []
    demographics: List[str] = []
    explicit_genres: List[str] = []


class PictureUrls(BaseModel):
    image_url: Optional[str] = None
    small_image_url: Optional[str] = None
    large_image_url: Optional[str] = None


class AnimeImagesData(BaseModel):
    jpgs: List[PictureUrls] = []
    webp: List[PictureUrls] = []
