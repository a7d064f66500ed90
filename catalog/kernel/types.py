"""
Catalog Kernel - Shared Types

Data classes used across store, join, query, reducer, renderer, and assembly.
These are the contracts that bind the kernel together.

Base records (User, Category, Product) are frozen: they are loaded once and
never mutated for the lifetime of a session. Wire dicts use the camelCase keys
of the fixture format (ownerId, categoryId); attributes are snake_case.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Empty owner name means "no owner filter" (the "All" tab)
ALL_OWNERS = ""


# ---------------------------------------------------------------------------
# Base records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class User:
    id: int
    name: str
    sex: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "sex": self.sex}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> User:
        return cls(id=d["id"], name=d["name"], sex=d.get("sex", ""))


@dataclass(frozen=True)
class Category:
    id: int
    title: str
    icon: str
    owner_id: int | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "icon": self.icon,
            "ownerId": self.owner_id,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Category:
        return cls(
            id=d["id"],
            title=d["title"],
            icon=d.get("icon", ""),
            owner_id=d.get("ownerId"),
        )


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    category_id: int | None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "categoryId": self.category_id}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Product:
        return cls(id=d["id"], name=d["name"], category_id=d.get("categoryId"))


# ---------------------------------------------------------------------------
# Derived records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EnrichedProduct:
    """
    A product with its category and the category's owner resolved.
    None is the absent marker for an unresolved reference.
    """

    id: int
    name: str
    category_id: int | None
    category: Category | None = None
    user: User | None = None

    @classmethod
    def from_product(
        cls,
        product: Product,
        category: Category | None,
        user: User | None,
    ) -> EnrichedProduct:
        return cls(
            id=product.id,
            name=product.name,
            category_id=product.category_id,
            category=category,
            user=user,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "categoryId": self.category_id,
            "category": self.category.to_dict() if self.category else None,
            "user": self.user.to_dict() if self.user else None,
        }


# ---------------------------------------------------------------------------
# Filter state
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FilterState:
    """
    The two-field UI selection driving visibility.

    selected_owner_name: "" means every owner passes.
    search_query: stored verbatim; case folding happens only when matching.
    """

    selected_owner_name: str = ALL_OWNERS
    search_query: str = ""

    def with_changes(self, **changes: Any) -> FilterState:
        return replace(self, **changes)

    @property
    def is_default(self) -> bool:
        return self == FilterState()

    def to_dict(self) -> dict[str, Any]:
        return {
            "selected_owner_name": self.selected_owner_name,
            "search_query": self.search_query,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> FilterState:
        return cls(
            selected_owner_name=d.get("selected_owner_name", ALL_OWNERS),
            search_query=d.get("search_query", ""),
        )


# ---------------------------------------------------------------------------
# Events and results
# ---------------------------------------------------------------------------


@dataclass
class Event:
    """
    One user interaction, as consumed by the reducer.
    The reducer reads only `type` and `payload`.
    """

    type: str
    payload: dict[str, Any] = field(default_factory=dict)
    sequence: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": self.payload, "sequence": self.sequence}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Event:
        return cls(
            type=d["type"],
            payload=d.get("payload", {}),
            sequence=d.get("sequence", 0),
        )


@dataclass
class ReduceResult:
    """
    Result of applying one event to a FilterState.
    The reducer never throws - it always returns one of these.
    """

    state: FilterState
    applied: bool
    error: str | None = None
