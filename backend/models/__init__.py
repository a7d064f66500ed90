"""
Pydantic models for the catalog API.

All data shapes defined here. No imports from routes.
"""

from backend.models.catalog import (
    CatalogResponse,
    CategoryResponse,
    FilterStateResponse,
    ProductListResponse,
    ProductResponse,
    SelectOwnerRequest,
    SetQueryRequest,
    UserResponse,
)

__all__ = [
    "CatalogResponse",
    "CategoryResponse",
    "FilterStateResponse",
    "ProductListResponse",
    "ProductResponse",
    "SelectOwnerRequest",
    "SetQueryRequest",
    "UserResponse",
]
