"""
Catalog Kernel - Enrichment Join

Pure function: (products, categories, users) → list[EnrichedProduct]
No side effects beyond a data-quality log line. Deterministic.

Each product gets its category (by categoryId) and that category's owner
(by ownerId). Unresolved references become None, never an exception.
Output order is input product order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from catalog.kernel.store import RecordStore, index_by_id
from catalog.kernel.types import Category, EnrichedProduct, Product, User

logger = logging.getLogger(__name__)


def enrich(
    products: Iterable[Product],
    categories: Iterable[Category],
    users: Iterable[User],
) -> list[EnrichedProduct]:
    """Join products to their category and owning user."""
    return _enrich_indexed(
        products,
        index_by_id(categories, "category"),
        index_by_id(users, "user"),
    )


def enrich_store(store: RecordStore) -> list[EnrichedProduct]:
    """enrich() over a RecordStore, reusing its prebuilt indexes."""
    return _enrich_indexed(store.products, store.categories_by_id, store.users_by_id)


def _enrich_indexed(
    products: Iterable[Product],
    categories_by_id: Mapping[int, Category],
    users_by_id: Mapping[int, User],
) -> list[EnrichedProduct]:
    result: list[EnrichedProduct] = []
    dangling = 0

    for product in products:
        category = categories_by_id.get(product.category_id) if product.category_id is not None else None
        user = None
        if category is not None and category.owner_id is not None:
            user = users_by_id.get(category.owner_id)

        if category is None or user is None:
            dangling += 1
        result.append(EnrichedProduct.from_product(product, category, user))

    if dangling:
        logger.warning("join: %d of %d products have no category or owner", dangling, len(result))

    return result
