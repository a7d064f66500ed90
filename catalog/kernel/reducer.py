"""
Catalog Kernel - Filter State Reducer

Pure function: (FilterState, Event) → ReduceResult
No side effects. No IO. Deterministic.

Given the same sequence of events, produces the same state every time.

The four controller operations (select_owner, set_query, clear_query,
reset_all) are total functions FilterState → FilterState. reduce() wraps
them behind event types so callers can drive the state from a log.
"""

from __future__ import annotations

from typing import Any

from catalog.kernel.types import ALL_OWNERS, Event, FilterState, ReduceResult

# ---------------------------------------------------------------------------
# Controller operations
# ---------------------------------------------------------------------------


def default_state() -> FilterState:
    """Both fields empty: every product visible."""
    return FilterState()


def select_owner(state: FilterState, name: str) -> FilterState:
    """Set the owner filter. "" means all owners. Query is untouched."""
    return state.with_changes(selected_owner_name=name)


def set_query(state: FilterState, text: str) -> FilterState:
    """Store the query verbatim - no trimming, no case folding."""
    return state.with_changes(search_query=text)


def clear_query(state: FilterState) -> FilterState:
    return set_query(state, "")


def reset_all(state: FilterState) -> FilterState:
    """Owner and query back to default in a single transition."""
    return state.with_changes(selected_owner_name=ALL_OWNERS, search_query="")


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------


def reduce(state: FilterState, event: Event) -> ReduceResult:
    """
    Apply one event to the current state.

    Never raises. Unknown types and malformed payloads come back as
    applied=False with the input state unchanged.
    """
    handler = _HANDLERS.get(event.type)
    if handler is None:
        return _reject(state, "UNKNOWN_EVENT", event.type)
    return handler(state, event)


def replay(events: list[Event], initial: FilterState | None = None) -> FilterState:
    """
    Fold events from the default state. Rejected events are skipped.
    replay([e1, e2]) == reduce(reduce(default, e1).state, e2).state
    """
    state = initial if initial is not None else default_state()
    for event in events:
        result = reduce(state, event)
        if result.applied:
            state = result.state
    return state


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _reject(state: FilterState, code: str, msg: str) -> ReduceResult:
    return ReduceResult(state=state, applied=False, error=f"{code}: {msg}")


def _ok(state: FilterState) -> ReduceResult:
    return ReduceResult(state=state, applied=True)


def _string_field(payload: dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if not isinstance(value, str):
        return None
    return value


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def _handle_owner_select(state: FilterState, event: Event) -> ReduceResult:
    name = _string_field(event.payload, "name")
    if name is None:
        return _reject(state, "INVALID_PAYLOAD", "owner.select requires a string 'name'")
    return _ok(select_owner(state, name))


def _handle_query_set(state: FilterState, event: Event) -> ReduceResult:
    text = _string_field(event.payload, "text")
    if text is None:
        return _reject(state, "INVALID_PAYLOAD", "query.set requires a string 'text'")
    return _ok(set_query(state, text))


def _handle_query_clear(state: FilterState, event: Event) -> ReduceResult:
    return _ok(clear_query(state))


def _handle_filters_reset(state: FilterState, event: Event) -> ReduceResult:
    return _ok(reset_all(state))


# ---------------------------------------------------------------------------
# Handler dispatch table
# ---------------------------------------------------------------------------

_HANDLERS: dict[str, Any] = {
    "owner.select": _handle_owner_select,
    "query.set": _handle_query_set,
    "query.clear": _handle_query_clear,
    "filters.reset": _handle_filters_reset,
}
