import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mediagate.api.anime import router as anime_router
from mediagate.api.movies import router as movies_router
from mediagate.api.routes import router as health_router
from mediagate.api.tv import router as tv_router
from mediagate.core.config import settings
from mediagate.core.logging_utils import configure_logging

configure_logging(settings.service_name, settings.log_level, settings.log_format)

app = FastAPI(title="media-gateway")

# --- CORS setup --------------------------------------------------------------
# Read-only gateway: GET only. Override origins with ALLOWED_ORIGINS (comma-separated).
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
    max_age=86400,
)

# Routers
app.include_router(health_router)
app.include_router(movies_router)
app.include_router(anime_router)
app.include_router(tv_router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
