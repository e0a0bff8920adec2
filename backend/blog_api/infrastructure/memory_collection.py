"""In-Memory Document Collection - DocumentCollection over a Python list.

Invariants:
    - Same semantics as SqlDocumentCollection: copies in, copies out,
      first-match update/delete, insertion order for find_all
    - Every primitive yields to the event loop before touching state, so
      concurrent callers interleave the way they do against a real driver

Design Decisions:
    - Used for STORE_BACKEND=memory (local runs without a database) and for
      store-level tests that need interleaving without SQLite
"""

import asyncio
import copy

from blog_api.core.domain_types import Filter, Mutation, Record
from blog_api.core.record_mutation import apply_mutation, matches, validate_mutation


class InMemoryDocumentCollection:
    """Process-local list of records."""

    def __init__(self, records: list[Record] | None = None):
        self._records: list[Record] = [copy.deepcopy(r) for r in records or []]

    async def find_one(self, filter_: Filter) -> Record | None:
        await asyncio.sleep(0)
        for record in self._records:
            if matches(record, filter_):
                return copy.deepcopy(record)
        return None

    async def find_all(self) -> list[Record]:
        await asyncio.sleep(0)
        return copy.deepcopy(self._records)

    async def insert(self, record: Record) -> None:
        await asyncio.sleep(0)
        self._records.append(copy.deepcopy(record))

    async def update(self, filter_: Filter, mutation: Mutation) -> int:
        validate_mutation(mutation)
        index = self._index_of(filter_)
        if index is None:
            return 0
        # read and write are separate steps, as with a remote store
        target = self._records[index]
        current = copy.deepcopy(target)
        await asyncio.sleep(0)
        if not any(record is target for record in self._records):
            return 0
        updated = apply_mutation(current, mutation)
        target.clear()
        target.update(updated)
        return 1

    async def delete(self, filter_: Filter) -> int:
        await asyncio.sleep(0)
        index = self._index_of(filter_)
        if index is None:
            return 0
        del self._records[index]
        return 1

    def _index_of(self, filter_: Filter) -> int | None:
        for index, record in enumerate(self._records):
            if matches(record, filter_):
                return index
        return None
