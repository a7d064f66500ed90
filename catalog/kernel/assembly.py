"""
Catalog Kernel - Session Assembly

Sits between the pure functions (join, query, reducer) and the presentation
layer (renderer, HTTP routes, CLI). Owns the one mutable thing in the kernel:
the current FilterState.

Lifecycle:
  1. Construct from a RecordStore - the enrichment join runs once, here.
  2. Each interaction goes through dispatch(): reduce → re-filter → notify.
  3. Readers take `state` and `visible_products`; both are always consistent.

Single-threaded and synchronous. Subscribers are called after the visible
products are recomputed, so they never observe a half-applied transition.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from catalog.kernel.events import (
    clear_query_event,
    reset_event,
    select_owner_event,
    set_query_event,
)
from catalog.kernel.join import enrich_store
from catalog.kernel.query import apply_filter
from catalog.kernel.reducer import default_state, reduce
from catalog.kernel.store import RecordStore, load_store
from catalog.kernel.types import Category, EnrichedProduct, Event, FilterState, ReduceResult

logger = logging.getLogger(__name__)

Subscriber = Callable[["CatalogSession"], None]


class CatalogSession:
    """
    One user's view of the catalog.
    Coordinates store + join + reducer + filter.
    """

    def __init__(self, store: RecordStore, state: FilterState | None = None):
        self._store = store
        self._products: tuple[EnrichedProduct, ...] = tuple(enrich_store(store))
        self._state = state if state is not None else default_state()
        self._visible: list[EnrichedProduct] = apply_filter(self._products, self._state)
        self._subscribers: list[Subscriber] = []
        self._sequence = 0

    @classmethod
    def from_path(cls, path: str | None = None) -> CatalogSession:
        return cls(load_store(path))

    # -- reads --

    @property
    def store(self) -> RecordStore:
        return self._store

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def products(self) -> tuple[EnrichedProduct, ...]:
        """The full enrichment, in display order."""
        return self._products

    @property
    def visible_products(self) -> list[EnrichedProduct]:
        # Copy so callers can't reorder the session's list
        return list(self._visible)

    @property
    def last_sequence(self) -> int:
        """Sequence number of the most recently dispatched event."""
        return self._sequence

    @property
    def owner_names(self) -> list[str]:
        return self._store.owner_names()

    @property
    def categories(self) -> tuple[Category, ...]:
        return self._store.categories

    def preview(self, state: FilterState) -> list[EnrichedProduct]:
        """Evaluate a filter against this session's products without changing state."""
        return apply_filter(self._products, state)

    # -- subscriptions --

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback run after every applied event. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # -- writes --

    def dispatch(self, event: Event) -> ReduceResult:
        """
        Reduce → re-filter → notify.
        Rejected events leave state and visible products untouched.
        """
        if event.sequence == 0:
            self._sequence += 1
            event = replace(event, sequence=self._sequence)
        else:
            self._sequence = max(self._sequence, event.sequence)

        result = reduce(self._state, event)
        if not result.applied:
            logger.warning("session: rejected event seq=%d: %s", event.sequence, result.error)
            return result

        self._state = result.state
        self._visible = apply_filter(self._products, self._state)
        logger.debug(
            "session: %s seq=%d → owner=%r query=%r visible=%d",
            event.type,
            event.sequence,
            self._state.selected_owner_name,
            self._state.search_query,
            len(self._visible),
        )

        for callback in list(self._subscribers):
            callback(self)

        return result

    def select_owner(self, name: str) -> ReduceResult:
        return self.dispatch(select_owner_event(name))

    def set_query(self, text: str) -> ReduceResult:
        return self.dispatch(set_query_event(text))

    def clear_query(self) -> ReduceResult:
        return self.dispatch(clear_query_event())

    def reset_all(self) -> ReduceResult:
        return self.dispatch(reset_event())
