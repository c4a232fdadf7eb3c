from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from . import routers
from .config import Settings, load_settings
from .stores import RecordStore, build_record_store

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(
    settings: Optional[Settings] = None, store: Optional[RecordStore] = None
) -> FastAPI:
    """Build the API around an explicit settings struct and record store"""
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    if store is None:
        store = build_record_store(settings.store)

    app = FastAPI(
        title="RSVP API",
        description="Event invitation RSVP submission and admin listing",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.record_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(routers.rsvp.router, prefix="/api/rsvp", tags=["rsvp"])
    app.include_router(routers.admin.router, prefix="/api/admin", tags=["admin"])

    @app.on_event("startup")
    async def startup_event():
        if store.configured():
            logger.info(f"🚀 Starting RSVP API ({settings.store.backend} store)")
        else:
            logger.warning(
                "⚠️ Record store is not configured; submissions and listings "
                "will fail until credentials are set"
            )

    @app.get("/")
    async def root():
        return {"message": "Welcome to the RSVP API", "status": "running"}

    @app.get("/health")
    async def health_check(request: Request):
        configured = request.app.state.record_store.configured()
        return {
            "status": "healthy" if configured else "degraded",
            "service": "rsvp-api",
            "version": "1.0.0",
            "store_configured": configured,
        }

    return app


if __name__ == "__main__":
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
