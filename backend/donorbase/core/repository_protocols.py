"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO goes through KeyValueStore; ids and time through IdGenerator / Clock
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in KeyValueStore: implementations do IO, but the core functions that
      transform the stored values are never async themselves
"""

from datetime import datetime
from typing import Protocol


class KeyValueStore(Protocol):
    """Ordered key-value store holding JSON-compatible dicts, one per namespace.

    insert() is an upsert (last write wins). values() enumerates every stored
    value in key order.
    """
    async def get(self, key: str) -> dict | None: ...
    async def insert(self, key: str, value: dict) -> None: ...
    async def remove(self, key: str) -> dict | None: ...
    async def values(self) -> list[dict]: ...


class IdGenerator(Protocol):
    """Produces collision-free string identifiers."""
    def __call__(self) -> str: ...


class Clock(Protocol):
    """Returns the current time as an aware UTC datetime."""
    def __call__(self) -> datetime: ...
