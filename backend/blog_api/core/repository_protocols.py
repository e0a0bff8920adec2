"""Boundary Protocols - the document collection contract between stores and storage.

Invariants:
    - Stores NEVER import a concrete collection; they receive one by injection
    - Records cross the boundary as plain dicts (copies, never live rows)
    - update() and delete() act on the first matching record only and report
      how many records they touched (0 or 1)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async methods: implementations do IO, and every await is a point where
      other requests may interleave, which is why stores hold a guard around them
"""

from typing import Protocol

from blog_api.core.domain_types import Filter, Mutation, Record


class DocumentCollection(Protocol):
    """Contract for one logical collection of documents."""
    async def find_one(self, filter_: Filter) -> Record | None: ...
    async def find_all(self) -> list[Record]: ...
    async def insert(self, record: Record) -> None: ...
    async def update(self, filter_: Filter, mutation: Mutation) -> int: ...
    async def delete(self, filter_: Filter) -> int: ...
