from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel

from mediagate import schemas as s

LIST_CAP = 20
IMAGE_CAP = 30

IMAGE_KEYS = ("backdrop_path", "poster_path")

M = TypeVar("M", bound=BaseModel)


def prefix_image(path: Optional[str], base: str) -> Optional[str]:
    """'/abc.jpg' -> '<base>/abc.jpg'; None or '' -> None."""
    if not path:
        return None
    return f"{base}{path}"


def with_prefixed_images(item: Dict[str, Any], base: str, keys: Iterable[str] = IMAGE_KEYS) -> Dict[str, Any]:
    """Copy of item with every image key prefixed; all other fields untouched."""
    out = dict(item)
    for k in keys:
        out[k] = prefix_image(item.get(k), base)
    return out


def prefix_all(items: Iterable[Dict[str, Any]], base: str) -> List[Dict[str, Any]]:
    return [with_prefixed_images(i, base) for i in items]


def project(items: Iterable[Dict[str, Any]], model: Type[M], base: str, cap: int = LIST_CAP) -> List[M]:
    """Prefix images, keep only the model's fields, first `cap` items."""
    return [model.model_validate(with_prefixed_images(i, base)) for i in list(items)[:cap]]


# --- images ------------------------------------------------------------------

def _image_items(raw: Optional[List[Dict[str, Any]]], base: str) -> List[s.ImageItem]:
    return [
        s.ImageItem(
            aspect_ratio=i.get("aspect_ratio"),
            height=i.get("height"),
            width=i.get("width"),
            file_path=prefix_image(i.get("file_path"), base),
        )
        for i in (raw or [])[:IMAGE_CAP]
    ]


def project_images(payload: Dict[str, Any], base: str) -> s.MediaImages:
    return s.MediaImages(
        backdrops=_image_items(payload.get("backdrops"), base),
        posters=_image_items(payload.get("posters"), base),
    )


# --- anime -------------------------------------------------------------------

def _names(entries: Optional[List[Dict[str, Any]]]) -> List[str]:
    return [e["name"] for e in (entries or [])]


def summarize_anime(anime: Dict[str, Any]) -> s.AnimeSummary:
    jpg = (anime.get("images") or {}).get("jpg") or {}
    trailer = anime.get("trailer") or {}
    trailer_images = trailer.get("images") or {}

    return s.AnimeSummary(
        mal_id=anime.get("mal_id"),
        mal_url=anime.get("url"),
        images=[
            jpg.get("image_url"),
            jpg.get("large_image_url"),
            trailer_images.get("maximum_image_url") or None,
        ],
        trailer=s.AnimeTrailer(
            yt_id=trailer.get("youtube_id"),
            yt_url=trailer.get("url"),
            embed_url=trailer.get("embed_url"),
        ),
        titles=s.AnimeTitles(
            default_title=anime.get("title"),
            japanese_title=anime.get("title_japanese"),
            english_title=anime.get("title_english"),
        ),
        episodes=anime.get("episodes"),
        rating=anime.get("rating"),
        type=anime.get("type"),
        source=anime.get("source"),
        status=anime.get("status"),
        score=anime.get("score"),
        rank=anime.get("rank"),
        popularity=anime.get("popularity"),
        synopsis=anime.get("synopsis"),
        background=anime.get("background"),
        season=anime.get("season"),
        year=anime.get("year"),
        genres=_names(anime.get("genres")),
        themes=_names(anime.get("themes")),
        demographics=_names(anime.get("demographics")),
        explicit_genres=_names(anime.get("explicit_genres")),
    )


def summarize_anime_list(items: Iterable[Dict[str, Any]], cap: int = LIST_CAP) -> List[s.AnimeSummary]:
    return [summarize_anime(a) for a in list(items)[:cap]]


def organize_pictures(pictures: List[Dict[str, Any]]) -> s.AnimeImagesData:
    """Split Jikan's [{jpg: {...}, webp: {...}}, ...] into parallel jpgs / webp lists."""

    def urls(fmt: Dict[str, Any]) -> s.PictureUrls:
        return s.PictureUrls(
            image_url=fmt.get("image_url"),
            small_image_url=fmt.get("small_image_url"),
            large_image_url=fmt.get("large_image_url"),
        )

    return s.AnimeImagesData(
        jpgs=[urls(p.get("jpg") or {}) for p in pictures],
        webp=[urls(p.get("webp") or {}) for p in pictures],
    )


def attach_anime_extras(detail: Dict[str, Any], pictures: List[Dict[str, Any]], videos: Any) -> Dict[str, Any]:
    """Detail body verbatim plus `images_data` and `videos`."""
    out = dict(detail)
    out["images_data"] = organize_pictures(pictures).model_dump()
    out["videos"] = videos
    return out


def popular_tv_out_of_range(page: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "pagination": {
            "current_page": page,
            "last_visible_page": payload.get("total_pages"),
            "has_next_page": False,
            "items": {
                "total_pages": payload.get("total_pages"),
                "total_results": payload.get("total_results"),
            },
        },
        "results": [],
        "popular_tv_shows": [],
        "message": "No results found for the requested page.",
    }


def popular_tv_page(payload: Dict[str, Any], base: str) -> s.PopularTvPage:
    return s.PopularTvPage(
        pagination=s.Pagination(
            current_page=payload.get("page"),
            total_pages=payload.get("total_pages"),
            total_results=payload.get("total_results"),
        ),
        popular_tv_shows=prefix_all(payload.get("results") or [], base),
    )
