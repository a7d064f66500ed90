"""HTTP client for the catalog API."""
from __future__ import annotations

from typing import Any

import httpx


class ApiClient:
    """HTTP client for the catalog API."""

    def __init__(self, api_url: str, transport: httpx.BaseTransport | None = None):
        self.api_url = api_url.rstrip("/")
        self.client = httpx.Client(base_url=self.api_url, timeout=10.0, transport=transport)

    def get(self, path: str, params: dict | None = None) -> Any:
        """Make GET request."""
        res = self.client.get(path, params=params or {}, headers={"Accept": "application/json"})
        res.raise_for_status()
        return res.json()

    def get_text(self, path: str) -> str:
        res = self.client.get(path, headers={"Accept": "text/plain"})
        res.raise_for_status()
        return res.text

    def post(self, path: str, data: dict | None = None) -> Any:
        """Make POST request."""
        res = self.client.post(path, json=data, headers={"Accept": "application/json"})
        res.raise_for_status()
        return res.json()

    # -- catalog operations --

    def catalog(self) -> dict:
        return self.get("/api/catalog")

    def select_owner(self, name: str) -> dict:
        return self.post("/api/catalog/owner", {"name": name})

    def set_query(self, text: str) -> dict:
        return self.post("/api/catalog/query", {"text": text})

    def clear_query(self) -> dict:
        return self.post("/api/catalog/query/clear")

    def reset(self) -> dict:
        return self.post("/api/catalog/reset")

    def render_text(self) -> str:
        return self.get_text("/catalog.txt")

    def close(self):
        self.client.close()
