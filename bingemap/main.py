from contextlib import asynccontextmanager
import logging

from dotenv import load_dotenv
from fastapi import FastAPI

from bingemap.api.routes_api import router as api_router
from bingemap.core.config import get_settings
from bingemap.core.logging_config import setup_logging
from bingemap.services.tmdb import series_cache

load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(app: FastAPI):
    """Application lifespan context manager."""
    setup_logging(get_settings().debug)
    logger.info("bingemap starting")
    try:
        yield
    finally:
        series_cache.clear()
        logger.info("bingemap stopped")


# Initialize FastAPI with overarching lifespan
app = FastAPI(
    title="bingemap",
    description="Episode rating heatmaps and binge-watch planning for TV series",
    version="0.1.0",
    lifespan=app_lifespan,
)

# Include routers
app.include_router(api_router, prefix="/api")
