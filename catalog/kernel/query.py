"""
Catalog Kernel - Filter Engine

Pure function: (enriched products, FilterState) → visible products

A product is visible iff it passes both:
  owner  - no owner selected, or its resolved user's name equals the
           selection exactly (case-sensitive)
  query  - its name contains the query, compared case-insensitively

Stable: the relative order of the input is kept. No matches is an empty list.
"""

from __future__ import annotations

from collections.abc import Iterable

from catalog.kernel.types import ALL_OWNERS, EnrichedProduct, FilterState


def matches_owner(product: EnrichedProduct, owner_name: str) -> bool:
    if owner_name == ALL_OWNERS:
        return True
    return product.user is not None and product.user.name == owner_name


def matches_query(product: EnrichedProduct, query: str) -> bool:
    return query.lower() in product.name.lower()


def apply_filter(products: Iterable[EnrichedProduct], state: FilterState) -> list[EnrichedProduct]:
    """Return the products visible under `state`, in input order."""
    owner = state.selected_owner_name
    query = state.search_query

    return [
        p
        for p in products
        if matches_owner(p, owner) and matches_query(p, query)
    ]
