"""Boundary Protocols - contracts between collections and the document store.

Invariants:
    - Core NEVER imports from the shell - dependency arrows point inward only
    - Collections reach persistence only through DocumentStore
    - Implementations provided by infrastructure via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; every call is atomic on its own,
      no transaction spans two calls
"""

from typing import Protocol
from uuid import UUID


class DocumentStore(Protocol):
    """Contract for one collection's slice of the store.

    A selector is a dict of field -> exact value; an empty selector matches all.
    """
    async def insert(self, doc: dict) -> UUID: ...
    async def find(self, selector: dict) -> list[dict]: ...
    async def count(self, selector: dict) -> int: ...
    async def update(self, doc_id: UUID, patch: dict) -> int: ...
    async def remove(self, selector: dict) -> int: ...
