"""
Pytest configuration and fixtures for backend tests.
"""

from __future__ import annotations

import json

import httpx
import pytest

from backend import session as catalog_session
from backend.main import app

TEST_CATALOG = {
    "users": [
        {"id": 1, "name": "Max", "sex": "m"},
        {"id": 2, "name": "Anna", "sex": "f"},
    ],
    "categories": [
        {"id": 1, "title": "Dairy", "icon": "🍺", "ownerId": 1},
        {"id": 2, "title": "Bakery", "icon": "🍞", "ownerId": 2},
        {"id": 3, "title": "Orphans", "icon": "❓", "ownerId": 99},
    ],
    "products": [
        {"id": 1, "name": "Milk", "categoryId": 1},
        {"id": 2, "name": "Bread", "categoryId": 2},
        {"id": 3, "name": "Stray", "categoryId": 3},
    ],
}


@pytest.fixture
def catalog_path(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(TEST_CATALOG), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def initialize_session(catalog_path):
    """Fresh session per test. The ASGI transport doesn't run lifespan."""
    session = catalog_session.init_session(catalog_path)
    yield session
    catalog_session.close_session()


@pytest.fixture
async def async_client():
    """Async HTTP client against the ASGI app."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
