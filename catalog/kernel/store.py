"""
Catalog Kernel - Record Store

Holds the three base collections (users, categories, products) for the
lifetime of a session and indexes them by id once.

Ids are expected to be unique within a collection. When they are not, the
first record in input order wins and later duplicates are skipped by the
index, which matches a linear "find first" lookup.

The only IO in the kernel lives here: load_store() reads a JSON fixture.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, TypeVar

from catalog.kernel.types import Category, Product, User

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).parent.parent / "data" / "catalog.json"

R = TypeVar("R", User, Category, Product)


class CatalogDataError(Exception):
    """Fixture file is missing, not valid JSON, or has the wrong shape."""

    pass


def index_by_id(records: Iterable[R], kind: str = "record") -> dict[int, R]:
    """Build an id → record mapping. First occurrence wins."""
    index: dict[int, R] = {}
    for record in records:
        if record.id in index:
            logger.warning("store: duplicate %s id=%s ignored", kind, record.id)
            continue
        index[record.id] = record
    return index


class RecordStore:
    """Immutable base collections plus their id indexes."""

    def __init__(
        self,
        users: Iterable[User],
        categories: Iterable[Category],
        products: Iterable[Product],
    ):
        self.users: tuple[User, ...] = tuple(users)
        self.categories: tuple[Category, ...] = tuple(categories)
        self.products: tuple[Product, ...] = tuple(products)

        self.users_by_id = index_by_id(self.users, "user")
        self.categories_by_id = index_by_id(self.categories, "category")

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> RecordStore:
        try:
            return cls(
                users=[User.from_dict(u) for u in d["users"]],
                categories=[Category.from_dict(c) for c in d["categories"]],
                products=[Product.from_dict(p) for p in d["products"]],
            )
        except (KeyError, TypeError) as e:
            raise CatalogDataError(f"Malformed catalog data: {e!r}") from e

    def to_dict(self) -> dict[str, Any]:
        return {
            "users": [u.to_dict() for u in self.users],
            "categories": [c.to_dict() for c in self.categories],
            "products": [p.to_dict() for p in self.products],
        }

    def get_user(self, user_id: int | None) -> User | None:
        if user_id is None:
            return None
        return self.users_by_id.get(user_id)

    def get_category(self, category_id: int | None) -> Category | None:
        if category_id is None:
            return None
        return self.categories_by_id.get(category_id)

    def owner_names(self) -> list[str]:
        """User names in input order - one filter tab each."""
        return [u.name for u in self.users]


def load_store(path: str | Path | None = None) -> RecordStore:
    """
    Read a JSON fixture of {"users": [...], "categories": [...], "products": [...]}.
    Raises CatalogDataError if the file can't be read or parsed.
    """
    data_path = Path(path) if path else DEFAULT_DATA_PATH
    try:
        raw = data_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogDataError(f"Cannot read catalog data at {data_path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CatalogDataError(f"Catalog data at {data_path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise CatalogDataError(f"Catalog data at {data_path} must be a JSON object")

    store = RecordStore.from_dict(data)
    logger.info(
        "store: loaded %d users, %d categories, %d products from %s",
        len(store.users),
        len(store.categories),
        len(store.products),
        data_path,
    )
    return store
