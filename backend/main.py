"""
Catalog FastAPI application.

Entry point for the API server.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend import session as catalog_session
from backend.config import settings
from backend.routes import catalog as catalog_routes
from backend.routes import pages as pages_routes

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Handles startup and shutdown logic:
    - Load the base records and build the session (fails startup on bad data)
    - Drop the session on shutdown
    """
    # Startup
    try:
        catalog_session.init_session(settings.CATALOG_DATA_PATH)
    except Exception:
        logger.exception("Failed to load catalog data")
        raise
    logger.info("Catalog session initialized")

    yield

    # Shutdown
    catalog_session.close_session()
    logger.info("Catalog session closed")


app = FastAPI(
    title=settings.APP_TITLE,
    docs_url="/docs" if settings.DOCS_ENABLED else None,
    redoc_url=None,
    lifespan=lifespan,
)

# Register routes
app.include_router(catalog_routes.router)
app.include_router(pages_routes.router)


@app.get("/health")
async def health():
    """Health check endpoint for uptime monitoring."""
    return {"status": "ok"}
