"""Catalog routes - read the visible products and drive the filter state."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backend.models.catalog import (
    CatalogResponse,
    CategoryResponse,
    FilterStateResponse,
    ProductListResponse,
    ProductResponse,
    SelectOwnerRequest,
    SetQueryRequest,
)
from backend.session import get_session
from catalog.kernel.assembly import CatalogSession
from catalog.kernel.types import FilterState, ReduceResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def _catalog_response(session: CatalogSession) -> CatalogResponse:
    visible = session.visible_products
    return CatalogResponse(
        state=FilterStateResponse.from_model(session.state),
        owners=session.owner_names,
        categories=[CategoryResponse.from_model(c) for c in session.categories],
        products=[ProductResponse.from_model(p) for p in visible],
        no_matches=not visible,
    )


def _applied_or_400(result: ReduceResult) -> None:
    if not result.applied:
        logger.warning("catalog: transition rejected: %s", result.error)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)


@router.get("", status_code=200)
async def get_catalog(session: CatalogSession = Depends(get_session)) -> CatalogResponse:
    """Current filter state and visible products."""
    return _catalog_response(session)


@router.get("/products", status_code=200)
async def list_products(
    owner: str = Query(default=""),
    query: str = Query(default=""),
    session: CatalogSession = Depends(get_session),
) -> ProductListResponse:
    """
    Evaluate a filter without touching the session's state.

    Same rules as the stateful endpoints: exact owner name, case-insensitive
    name substring.
    """
    products = session.preview(FilterState(selected_owner_name=owner, search_query=query))
    return ProductListResponse(
        products=[ProductResponse.from_model(p) for p in products],
        count=len(products),
    )


@router.post("/owner", status_code=200)
async def select_owner(
    req: SelectOwnerRequest,
    session: CatalogSession = Depends(get_session),
) -> CatalogResponse:
    """Select an owner tab. Empty name selects "All"."""
    _applied_or_400(session.select_owner(req.name))
    return _catalog_response(session)


@router.post("/query", status_code=200)
async def set_query(
    req: SetQueryRequest,
    session: CatalogSession = Depends(get_session),
) -> CatalogResponse:
    _applied_or_400(session.set_query(req.text))
    return _catalog_response(session)


@router.post("/query/clear", status_code=200)
async def clear_query(session: CatalogSession = Depends(get_session)) -> CatalogResponse:
    _applied_or_400(session.clear_query())
    return _catalog_response(session)


@router.post("/reset", status_code=200)
async def reset_filters(session: CatalogSession = Depends(get_session)) -> CatalogResponse:
    """Reset owner and query together."""
    _applied_or_400(session.reset_all())
    return _catalog_response(session)
