from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from kpop_stylist import __version__
from kpop_stylist.config import Settings, load_settings, logger

from .routers import router


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; routes not under /api fall through to static files."""

    settings = settings or load_settings()

    app = FastAPI(
        title="K-Pop Stylist API",
        description="AI-powered K-pop idol styling consultation service",
        version=__version__,
    )
    app.state.settings = settings

    app.include_router(router)

    if settings.static_dir and Path(settings.static_dir).is_dir():
        app.mount(
            "/",
            StaticFiles(directory=settings.static_dir, html=True),
            name="static",
        )
        logger.info(f"Serving static assets from {settings.static_dir}")
    else:
        logger.info("No static asset directory found; serving API routes only")

    logger.info("K-Pop Stylist API initialized successfully")
    return app


app = create_app()
