"""
Process-wide catalog session.

The base records load once at startup and the session lives until shutdown.
All route access goes through get_session().
"""

from __future__ import annotations

import logging
from pathlib import Path

from catalog.kernel.assembly import CatalogSession
from catalog.kernel.store import load_store

logger = logging.getLogger(__name__)

session: CatalogSession | None = None


def init_session(path: str | Path | None = None) -> CatalogSession:
    """
    Load the fixture and build the session.
    Called once at application startup. Raises CatalogDataError on bad data.
    """
    global session
    session = CatalogSession(load_store(path or None))
    logger.info("session: ready with %d products", len(session.products))
    return session


def close_session() -> None:
    """Drop the session. Called at application shutdown."""
    global session
    session = None


def get_session() -> CatalogSession:
    """FastAPI dependency. Fails loudly if startup didn't run."""
    if session is None:
        raise RuntimeError("Catalog session not initialized. Call init_session() first.")
    return session
