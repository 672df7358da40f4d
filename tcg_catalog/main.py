"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tcg_catalog.config import configure_logging, get_settings
from tcg_catalog.database import dispose_engine, initialize_database
from tcg_catalog.infrastructure.catalog.routers import series
from tcg_catalog.infrastructure.common.error_handlers import register_error_handlers
from tcg_catalog.infrastructure.common.routers import health

settings = get_settings()
configure_logging(settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Startup/shutdown lifecycle."""
    initialize_database(settings)
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()
    logger.info("application_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(series.router, prefix=settings.API_V1_PREFIX)
