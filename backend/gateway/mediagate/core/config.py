import os
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, validate_default=True)

    service_name: str = os.getenv("SERVICE_NAME", "media-gateway")

    # Provider A (movies / tv)
    tmdb_base_url: str = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")
    tmdb_image_base_url: str = os.getenv("TMDB_IMAGE_BASE_URL", "https://image.tmdb.org/t/p/original")
    tmdb_access_token: str = os.getenv("TMDB_ACCESS_TOKEN", "")

    # Provider B (anime), no auth
    jikan_base_url: str = os.getenv("JIKAN_BASE_URL", "https://api.jikan.moe/v4")

    # unset: httpx's own default timeout applies
    upstream_timeout_sec: Optional[float] = (
        float(os.environ["UPSTREAM_TIMEOUT_SEC"]) if os.getenv("UPSTREAM_TIMEOUT_SEC") else None
    )

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "console")
    allowed_origins: str = os.getenv("ALLOWED_ORIGINS", DEFAULT_ORIGINS)

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    @field_validator("tmdb_base_url", "jikan_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def tmdb_headers(self) -> Dict[str, str]:
        return {
            "accept": "application/json",
            "Authorization": f"Bearer {self.tmdb_access_token}",
        }

    @property
    def jikan_headers(self) -> Dict[str, str]:
        return {"accept": "application/json"}

    @property
    def origins(self) -> List[str]:
        # e.g., ALLOWED_ORIGINS="http://localhost:5173,https://my.dev.site"
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


settings = Settings()
