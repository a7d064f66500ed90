"""
Catalog Kernel - Event Construction

Factory functions for creating well-formed events.
Used by the session to wrap controller calls before feeding them to the
reducer, and by tests to build events concisely.
"""

from __future__ import annotations

from typing import Any

from catalog.kernel.types import Event


def make_event(type: str, payload: dict[str, Any] | None = None, *, seq: int = 0) -> Event:
    """Build an Event from a type and optional payload."""
    return Event(type=type, payload=dict(payload or {}), sequence=seq)


def select_owner_event(name: str, *, seq: int = 0) -> Event:
    return make_event("owner.select", {"name": name}, seq=seq)


def set_query_event(text: str, *, seq: int = 0) -> Event:
    return make_event("query.set", {"text": text}, seq=seq)


def clear_query_event(*, seq: int = 0) -> Event:
    return make_event("query.clear", seq=seq)


def reset_event(*, seq: int = 0) -> Event:
    return make_event("filters.reset", seq=seq)
