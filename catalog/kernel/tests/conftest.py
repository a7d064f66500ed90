"""
Catalog kernel test configuration.

Shared record fixtures. `example_store` is the two-product catalog used
throughout the filter walkthroughs; `bundled_store` is the fixture shipped
in catalog/data.
"""

import pytest

from catalog.kernel.store import RecordStore, load_store
from catalog.kernel.types import Category, Product, User

EXAMPLE_DATA = {
    "users": [
        {"id": 1, "name": "Max", "sex": "m"},
        {"id": 2, "name": "Anna", "sex": "f"},
    ],
    "categories": [
        {"id": 1, "title": "Dairy", "icon": "🍺", "ownerId": 1},
        {"id": 2, "title": "Bakery", "icon": "🍞", "ownerId": 2},
    ],
    "products": [
        {"id": 1, "name": "Milk", "categoryId": 1},
        {"id": 2, "name": "Bread", "categoryId": 2},
    ],
}


@pytest.fixture
def example_data():
    return {k: [dict(r) for r in v] for k, v in EXAMPLE_DATA.items()}


@pytest.fixture
def example_store(example_data):
    return RecordStore.from_dict(example_data)


@pytest.fixture
def dangling_store():
    """
    Products whose references don't all resolve:
      3 → category 9 (missing)
      4 → category 3, owned by user 99 (missing)
      5 → category None
    """
    return RecordStore(
        users=[User(1, "Max", "m"), User(2, "Anna", "f")],
        categories=[
            Category(1, "Dairy", "🍺", 1),
            Category(2, "Bakery", "🍞", 2),
            Category(3, "Orphans", "❓", 99),
        ],
        products=[
            Product(1, "Milk", 1),
            Product(2, "Bread", 2),
            Product(3, "Ghost", 9),
            Product(4, "Stray", 3),
            Product(5, "Loose", None),
        ],
    )


@pytest.fixture
def bundled_store():
    return load_store()
