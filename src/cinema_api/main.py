"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cinema_api import __version__
from cinema_api.api.routes import health, movies, schedules
from cinema_api.config import settings
from cinema_api.database import engine, init_models

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: optionally create missing tables for a development database
    if settings.database_create_tables:
        await init_models()
        logger.info("Database tables created")

    logger.info("Cinema API started")

    yield

    # Shutdown: release pooled connections
    await engine.dispose()
    logger.info("Database engine disposed")


configure_logging()

# Create FastAPI app
app = FastAPI(
    title="Cinema API",
    description="Movies and their screening schedules",
    version=__version__,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(movies.router, prefix="/api", tags=["movies"])
app.include_router(schedules.router, prefix="/api", tags=["schedules"])
