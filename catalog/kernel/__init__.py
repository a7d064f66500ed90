"""
Catalog Kernel - the pure core.

Components:
  store     - immutable users / categories / products, indexed by id
  join      - products → enriched products (category + owning user)
  query     - (enriched products, filter state) → visible products
  reducer   - (filter state, event) → filter state  (pure, deterministic)
  assembly  - CatalogSession: coordinates the above for one user
  renderer  - session → HTML / text
"""

from catalog.kernel.assembly import CatalogSession
from catalog.kernel.join import enrich, enrich_store
from catalog.kernel.query import apply_filter
from catalog.kernel.reducer import (
    clear_query,
    default_state,
    reduce,
    replay,
    reset_all,
    select_owner,
    set_query,
)
from catalog.kernel.store import CatalogDataError, RecordStore, load_store

__all__ = [
    "CatalogSession",
    "CatalogDataError",
    "RecordStore",
    "load_store",
    "enrich",
    "enrich_store",
    "apply_filter",
    "default_state",
    "select_owner",
    "set_query",
    "clear_query",
    "reset_all",
    "reduce",
    "replay",
]
