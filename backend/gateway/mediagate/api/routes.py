from fastapi import APIRouter

from mediagate.core.config import settings

router = APIRouter()


@router.get("/healthz")
async def healthz():
    """Liveness plus the upstream hosts this instance proxies to (no upstream call is made)."""
    return {
        "status": "ok",
        "service": settings.service_name,
        "upstreams": {
            "tmdb": settings.tmdb_base_url,
            "jikan": settings.jikan_base_url,
        },
    }
