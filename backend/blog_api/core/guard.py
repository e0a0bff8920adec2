"""Collection Guard - asyncio shared/exclusive lock scoped to one collection.

Invariants:
    - Any number of shared holders, or exactly one exclusive holder, never both
    - A waiting exclusive request blocks newly arriving shared requests
    - Waiters are woken in arrival order (asyncio.Condition is FIFO)

Design Decisions:
    - asyncio.Condition over threading primitives: every request runs as a task
      on the server event loop, so the guard never blocks the loop itself
    - Context managers (shared()/exclusive()) so release happens on every exit path
    - Release updates the counters without awaiting, then wakes waiters under a
      shielded lock acquire: a second cancellation during release can delay the
      wake-up but never leave a reader count or writer flag behind
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class CollectionGuard:
    """Single-writer/multi-reader lock over one logical collection."""

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def writer_active(self) -> bool:
        return self._writer

    @asynccontextmanager
    async def shared(self) -> AsyncIterator[None]:
        """Hold the guard in shared (read) mode."""
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and not self._writers_waiting,
            )
            self._readers += 1
        try:
            yield
        finally:
            self._readers -= 1
            if not self._readers:
                await asyncio.shield(self._wake())

    @asynccontextmanager
    async def exclusive(self) -> AsyncIterator[None]:
        """Hold the guard in exclusive (write) mode."""
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer and not self._readers,
                )
            except BaseException:
                # Readers parked behind this writer must re-check.
                self._writers_waiting -= 1
                self._cond.notify_all()
                raise
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            self._writer = False
            await asyncio.shield(self._wake())

    async def _wake(self) -> None:
        async with self._cond:
            self._cond.notify_all()
