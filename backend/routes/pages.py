"""Page serving - GET / renders the catalog for the current filter state."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse

from backend.session import get_session
from catalog.kernel.assembly import CatalogSession
from catalog.kernel.renderer import render_html, render_text

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def serve_catalog_page(session: CatalogSession = Depends(get_session)) -> HTMLResponse:
    """Serve the catalog page. Rendered fresh from the session on every request."""
    return HTMLResponse(
        content=render_html(session),
        headers={"Cache-Control": "no-store", "X-Content-Type-Options": "nosniff"},
    )


@router.get("/catalog.txt", response_class=PlainTextResponse)
async def serve_catalog_text(session: CatalogSession = Depends(get_session)) -> PlainTextResponse:
    """Plain text rendering, for terminals."""
    return PlainTextResponse(content=render_text(session))
