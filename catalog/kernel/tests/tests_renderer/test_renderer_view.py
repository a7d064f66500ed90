"""
Catalog Renderer Tests

Covers:
  - Owner tabs: "All" first, then users in input order; exactly one active
  - Clear button only when a query is set
  - Category cell "{icon} - {title}"; empty when unresolved
  - User cell class by sex
  - Empty result renders the no-match message instead of the table
  - HTML escaping of user content; text channel unescaped
  - Deterministic output
"""

import pytest

from catalog.kernel.assembly import CatalogSession
from catalog.kernel.renderer import (
    NO_MATCHES_MESSAGE,
    build_view,
    category_label,
    render,
    render_html,
    render_text,
    user_class,
)
from catalog.kernel.store import RecordStore
from catalog.kernel.types import Category, Product, User


def assert_contains(html, *fragments):
    for fragment in fragments:
        assert fragment in html, (
            f"Expected to find {fragment!r} in rendered output.\nGot (first 3000 chars):\n{html[:3000]}"
        )


def assert_not_contains(html, *fragments):
    for fragment in fragments:
        assert fragment not in html, f"Did NOT expect to find {fragment!r} in rendered output."


@pytest.fixture
def session(example_store):
    return CatalogSession(example_store)


class TestViewModel:
    def test_owner_tabs(self, session):
        owners = build_view(session)["owners"]
        assert [o["label"] for o in owners] == ["All", "Max", "Anna"]
        assert [o["active"] for o in owners] == [True, False, False]

    def test_selected_owner_tab_active(self, session):
        session.select_owner("Anna")
        owners = build_view(session)["owners"]
        assert [o["label"] for o in owners if o["active"]] == ["Anna"]

    def test_unknown_owner_no_tab_active(self, session):
        session.select_owner("Ghost")
        assert not any(o["active"] for o in build_view(session)["owners"])

    def test_query_and_clear_flag(self, session):
        assert build_view(session)["has_query"] is False
        session.set_query("Br")
        view = build_view(session)
        assert view["query"] == "Br"
        assert view["has_query"] is True

    def test_rows(self, session):
        rows = build_view(session)["products"]
        assert rows[0] == {
            "id": 1,
            "name": "Milk",
            "category": "🍺 - Dairy",
            "user": "Max",
            "user_class": "has-text-link",
        }
        assert rows[1]["user_class"] == "has-text-danger"

    def test_categories_listed(self, session):
        assert [c["title"] for c in build_view(session)["categories"]] == ["Dairy", "Bakery"]

    def test_no_products_flag(self, session):
        session.set_query("zzz")
        view = build_view(session)
        assert view["has_products"] is False
        assert view["products"] == []


class TestCellHelpers:
    def test_category_label_absent(self):
        assert category_label(None) == ""

    def test_user_class_absent_and_unknown(self):
        assert user_class(None) == ""
        assert user_class(User(1, "Sam", "x")) == ""


class TestHtml:
    def test_table_rows(self, session):
        html = render_html(session)
        assert_contains(
            html,
            'data-cy="ProductTable"',
            '<td data-cy="ProductName">Milk</td>',
            '<td data-cy="ProductCategory">🍺 - Dairy</td>',
            'class="has-text-danger">Anna</td>',
        )
        assert_not_contains(html, NO_MATCHES_MESSAGE)

    def test_no_matches_message(self, session):
        session.select_owner("NonexistentUser")
        html = render_html(session)
        assert_contains(html, f'<p data-cy="NoMatchingMessage">{NO_MATCHES_MESSAGE}</p>')
        assert_not_contains(html, 'data-cy="ProductTable"')

    def test_clear_button_only_with_query(self, session):
        assert_not_contains(render_html(session), 'data-cy="ClearButton"')
        session.set_query("m")
        assert_contains(render_html(session), 'data-cy="ClearButton"', 'value="m"')

    def test_active_tab(self, session):
        session.select_owner("Max")
        assert_contains(render_html(session), 'data-owner="Max" class="is-active">Max</a>')

    def test_escapes_content(self):
        store = RecordStore(
            users=[User(1, "<b>Eve</b>", "f")],
            categories=[Category(1, "Tools & Co", "🔧", 1)],
            products=[Product(1, '<script>alert("x")</script>', 1)],
        )
        html = render_html(CatalogSession(store))
        assert_not_contains(html, "<script>alert", "<b>Eve</b>")
        assert_contains(html, "&lt;script&gt;", "Tools &amp; Co")

    def test_deterministic(self, session):
        assert render_html(session) == render_html(session)

    def test_render_dispatches_channel(self, session):
        assert render(session) == render_html(session)
        assert render(session, channel="text") == render_text(session)


class TestText:
    def test_rows_and_tabs(self, session):
        session.select_owner("Max")
        text = render_text(session)
        assert_contains(text, "Owner: All  [Max]  Anna", "Search: (none)", "1 | Milk | 🍺 - Dairy | Max")
        assert_not_contains(text, "Bread")

    def test_no_matches(self, session):
        session.set_query("zzz")
        text = render_text(session)
        assert_contains(text, "Search: zzz", NO_MATCHES_MESSAGE)

    def test_not_html_escaped(self):
        store = RecordStore(
            users=[User(1, "Eve", "f")],
            categories=[Category(1, "Tools & Co", "🔧", 1)],
            products=[Product(1, "Nuts & Bolts", 1)],
        )
        text = render_text(CatalogSession(store))
        assert_contains(text, "1 | Nuts & Bolts | 🔧 - Tools & Co | Eve")

    def test_unresolved_cells_empty(self, dangling_store):
        text = render_text(CatalogSession(dangling_store))
        assert_contains(text, "3 | Ghost |  | ", "4 | Stray | ❓ - Orphans | ")
