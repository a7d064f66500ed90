"""
Catalog Kernel - Renderer

Pure function: (session) → HTML string (or text string)
No IO. Deterministic: same input → same output, always.

Two steps:
  build_view  - session → plain dict view model (owner tabs, search box,
                category buttons, product rows, empty-state message)
  render_*    - view model → Mustache template via chevron

Multi-channel: render_html for the web page, render_text for the terminal.
"""

from __future__ import annotations

from typing import Any, Protocol

import chevron

from catalog.kernel.types import ALL_OWNERS, Category, EnrichedProduct, FilterState, User

NO_MATCHES_MESSAGE = "No products matching selected criteria"
PAGE_TITLE = "Product Categories"

# Sex → CSS class for the user cell
USER_CLASSES: dict[str, str] = {
    "m": "has-text-link",
    "f": "has-text-danger",
}


class CatalogView(Protocol):
    """Anything exposing what the renderer reads. CatalogSession satisfies it."""

    @property
    def state(self) -> FilterState: ...

    @property
    def visible_products(self) -> list[EnrichedProduct]: ...

    @property
    def owner_names(self) -> list[str]: ...

    @property
    def categories(self) -> tuple[Category, ...]: ...


# ---------------------------------------------------------------------------
# View model
# ---------------------------------------------------------------------------


def category_label(category: Category | None) -> str:
    if category is None:
        return ""
    return f"{category.icon} - {category.title}"


def user_class(user: User | None) -> str:
    if user is None:
        return ""
    return USER_CLASSES.get(user.sex, "")


def product_row(product: EnrichedProduct) -> dict[str, Any]:
    return {
        "id": product.id,
        "name": product.name,
        "category": category_label(product.category),
        "user": product.user.name if product.user else "",
        "user_class": user_class(product.user),
    }


def build_view(session: CatalogView) -> dict[str, Any]:
    """Everything a template needs, as plain data."""
    state = session.state
    selected = state.selected_owner_name
    visible = session.visible_products

    owners = [{"label": "All", "value": ALL_OWNERS, "active": selected == ALL_OWNERS}]
    owners.extend({"label": name, "value": name, "active": selected == name} for name in session.owner_names)

    return {
        "title": PAGE_TITLE,
        "owners": owners,
        "query": state.search_query,
        "has_query": bool(state.search_query),
        "categories": [{"id": c.id, "title": c.title} for c in session.categories],
        "products": [product_row(p) for p in visible],
        "has_products": bool(visible),
        "no_matches_message": NO_MATCHES_MESSAGE,
    }


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

_HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{title}}</title>
</head>
<body>
<div class="section">
  <div class="container">
    <h1 class="title">{{title}}</h1>
    <nav class="panel">
      <p class="panel-heading">Filters</p>
      <p class="panel-tabs has-text-weight-bold">
        {{#owners}}
        <a data-owner="{{value}}" class="{{#active}}is-active{{/active}}">{{label}}</a>
        {{/owners}}
      </p>
      <div class="panel-block">
        <input data-cy="SearchField" type="text" class="input" placeholder="Search" value="{{query}}">
        {{#has_query}}<button data-cy="ClearButton" aria-label="Clear input" type="button" class="delete"></button>{{/has_query}}
      </div>
      <div class="panel-block is-flex-wrap-wrap">
        <a class="button is-success mr-6 is-outlined">All</a>
        {{#categories}}
        <a data-cy="Category" class="button mr-2 my-1 is-info">{{title}}</a>
        {{/categories}}
      </div>
      <div class="panel-block">
        <a data-cy="ResetAllButton" class="button is-link is-outlined is-fullwidth">Reset all filters</a>
      </div>
    </nav>
    <div class="box table-container">
      {{#has_products}}
      <table data-cy="ProductTable" class="table is-striped is-narrow is-fullwidth">
        <thead><tr><th>ID</th><th>Product</th><th>Category</th><th>User</th></tr></thead>
        <tbody>
          {{#products}}
          <tr data-cy="Product">
            <td class="has-text-weight-bold" data-cy="ProductId">{{id}}</td>
            <td data-cy="ProductName">{{name}}</td>
            <td data-cy="ProductCategory">{{category}}</td>
            <td data-cy="ProductUser" class="{{user_class}}">{{user}}</td>
          </tr>
          {{/products}}
        </tbody>
      </table>
      {{/has_products}}
      {{^has_products}}
      <p data-cy="NoMatchingMessage">{{no_matches_message}}</p>
      {{/has_products}}
    </div>
  </div>
</div>
</body>
</html>
"""

# Triple mustache: the text channel is never HTML-escaped
_TEXT_ROW = "{{{id}}} | {{{name}}} | {{{category}}} | {{{user}}}"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render(session: CatalogView, channel: str = "html") -> str:
    if channel == "text":
        return render_text(session)
    return render_html(session)


def render_html(session: CatalogView) -> str:
    return chevron.render(_HTML_TEMPLATE, build_view(session))


def render_view_text(view: dict[str, Any]) -> str:
    """Plain text rendering of a view model (terminal)."""
    parts: list[str] = [view["title"], "=" * len(view["title"]), ""]

    tabs = []
    for owner in view["owners"]:
        label = owner["label"]
        tabs.append(f"[{label}]" if owner["active"] else label)
    parts.append("Owner: " + "  ".join(tabs))
    parts.append(f"Search: {view['query']}" if view["has_query"] else "Search: (none)")
    parts.append("")

    if not view["has_products"]:
        parts.append(view["no_matches_message"])
        return "\n".join(parts)

    parts.append("ID | Product | Category | User")
    for row in view["products"]:
        parts.append(chevron.render(_TEXT_ROW, row))

    return "\n".join(parts)


def render_text(session: CatalogView) -> str:
    return render_view_text(build_view(session))
