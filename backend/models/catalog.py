"""Catalog models - request bodies and responses for /api/catalog."""

from __future__ import annotations

from pydantic import BaseModel

from catalog.kernel.types import Category, EnrichedProduct, FilterState, User


class SelectOwnerRequest(BaseModel):
    """What the client sends to POST /api/catalog/owner. Empty name = all owners."""

    model_config = {"extra": "forbid"}

    name: str = ""


class SetQueryRequest(BaseModel):
    """What the client sends to POST /api/catalog/query. Stored verbatim."""

    model_config = {"extra": "forbid"}

    text: str


class UserResponse(BaseModel):
    id: int
    name: str
    sex: str

    @classmethod
    def from_model(cls, user: User) -> UserResponse:
        return cls(id=user.id, name=user.name, sex=user.sex)


class CategoryResponse(BaseModel):
    id: int
    title: str
    icon: str
    owner_id: int | None = None

    @classmethod
    def from_model(cls, category: Category) -> CategoryResponse:
        return cls(id=category.id, title=category.title, icon=category.icon, owner_id=category.owner_id)


class ProductResponse(BaseModel):
    """One visible row. category / user are null when the reference doesn't resolve."""

    id: int
    name: str
    category_id: int | None = None
    category: CategoryResponse | None = None
    user: UserResponse | None = None

    @classmethod
    def from_model(cls, product: EnrichedProduct) -> ProductResponse:
        return cls(
            id=product.id,
            name=product.name,
            category_id=product.category_id,
            category=CategoryResponse.from_model(product.category) if product.category else None,
            user=UserResponse.from_model(product.user) if product.user else None,
        )


class FilterStateResponse(BaseModel):
    selected_owner_name: str
    search_query: str

    @classmethod
    def from_model(cls, state: FilterState) -> FilterStateResponse:
        return cls(selected_owner_name=state.selected_owner_name, search_query=state.search_query)


class CatalogResponse(BaseModel):
    """Everything the page needs after any transition."""

    state: FilterStateResponse
    owners: list[str]
    categories: list[CategoryResponse]
    products: list[ProductResponse]
    no_matches: bool


class ProductListResponse(BaseModel):
    """Stateless filter result from GET /api/catalog/products."""

    products: list[ProductResponse]
    count: int
