"""Blog Store - guarded blog mutations and monotonic id assignment.

Invariants:
    - list_blogs holds the guard in shared mode for the whole scan
    - create/like/comment/delete hold it in exclusive mode for their whole
      read-modify-write span; the id counter is only touched inside that span
    - Payloads and ids are decoded before the guard is taken
    - A mutation that started is not aborted by caller cancellation

Design Decisions:
    - One coarse guard for the whole collection: no lost updates, no torn reads,
      all writers serialized
    - IdSequence owned by the store instance, never module-level state
    - asyncio.shield around exclusive sections: a disconnecting client cancels
      its request task, not the mutation already holding the guard
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, TypeVar

from blog_api.core.domain_types import BlogId, MutationOperator, Record
from blog_api.core.errors import BlogNotFoundError
from blog_api.core.guard import CollectionGuard
from blog_api.core.id_sequence import IdSequence
from blog_api.core.repository_protocols import DocumentCollection
from blog_api.schemas.blog import BlogDraft, CommentPayload
from blog_api.services.decode_payload import decode_blog_id, decode_payload

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BlogStore:
    """Owns the blogs collection, its guard and its id counter."""

    def __init__(
        self,
        collection: DocumentCollection,
        id_sequence: IdSequence | None = None,
    ):
        self._collection = collection
        self._guard = CollectionGuard()
        self._ids = id_sequence or IdSequence()

    @property
    def guard(self) -> CollectionGuard:
        return self._guard

    @property
    def last_assigned_id(self) -> int:
        return self._ids.current

    async def list_blogs(self) -> list[Record]:
        async with self._guard.shared():
            return await self._collection.find_all()

    async def create_blog(self, draft: Any) -> Record:
        """Store a new blog and return it with its assigned id."""
        decoded = decode_payload(BlogDraft, draft)
        return await self._exclusive(self._insert_blog, decoded)

    async def like_blog(self, blog_id: Any) -> None:
        target = decode_blog_id(blog_id)
        await self._exclusive(
            self._update_blog, target,
            {MutationOperator.INC.value: {"likes": 1}},
        )
        logger.info(f"Blog {target} liked", extra={"blog_id": target})

    async def comment_blog(self, blog_id: Any, comment: Any) -> None:
        target = decode_blog_id(blog_id)
        decoded = decode_payload(CommentPayload, comment)
        await self._exclusive(
            self._update_blog, target,
            {MutationOperator.PUSH.value: {"comments": decoded.model_dump()}},
        )
        logger.info(f"Comment added to blog {target}", extra={"blog_id": target})

    async def delete_blog(self, blog_id: Any) -> None:
        target = decode_blog_id(blog_id)
        await self._exclusive(self._delete_blog, target)
        logger.info(f"Blog {target} deleted", extra={"blog_id": target})

    async def seed_ids_from_store(self) -> int:
        """Advance the counter past the largest id already stored."""
        return await self._exclusive(self._seed_ids)

    # ─── Exclusive sections (guard held) ─────────────────────────

    async def _exclusive(
        self, operation: Callable[..., Awaitable[T]], *args: Any,
    ) -> T:
        async def guarded() -> T:
            async with self._guard.exclusive():
                return await operation(*args)

        return await asyncio.shield(guarded())

    async def _insert_blog(self, draft: BlogDraft) -> Record:
        blog_id = self._ids.next_id()
        record = {"id": blog_id, **draft.model_dump()}
        await self._collection.insert(record)
        logger.info(f"Blog {blog_id} created", extra={"blog_id": blog_id})
        return record

    async def _update_blog(self, blog_id: BlogId, mutation: dict) -> None:
        matched = await self._collection.update({"id": blog_id}, mutation)
        if not matched:
            logger.warning(f"Blog {blog_id} not found for update", extra={"blog_id": blog_id})
            raise BlogNotFoundError(blog_id)

    async def _delete_blog(self, blog_id: BlogId) -> None:
        deleted = await self._collection.delete({"id": blog_id})
        if not deleted:
            logger.warning(f"Blog {blog_id} not found for delete", extra={"blog_id": blog_id})
            raise BlogNotFoundError(blog_id)

    async def _seed_ids(self) -> int:
        records = await self._collection.find_all()
        highest = max((int(r.get("id") or 0) for r in records), default=0)
        self._ids.advance_to(highest)
        logger.info(f"Blog id counter seeded at {self._ids.current}")
        return self._ids.current
