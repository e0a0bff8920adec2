"""Blog Routes - list, create, delete, like and comment on blog posts.

Invariants:
    - Bodies and path ids are decoded by FastAPI before the store is called
      (non-integer, non-positive or out-of-range id -> 400)
    - Store errors propagate to the global handlers (404 missing blog, 503 store down)
"""

import logging

from fastapi import APIRouter, Depends, Path, status

from blog_api.core.domain_types import MAX_BLOG_ID
from blog_api.schemas.blog import BlogDraft, BlogResponse, CommentPayload
from blog_api.services.blog_store import BlogStore
from blog_api.services.store_registry import get_blog_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/blogs", tags=["blogs"])


@router.get("", response_model=list[BlogResponse])
async def list_blogs(store: BlogStore = Depends(get_blog_store)):
    """Return every blog."""
    return await store.list_blogs()


@router.post(
    "", response_model=BlogResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_blog(
    body: BlogDraft, store: BlogStore = Depends(get_blog_store),
):
    """Create a blog; any id in the body is ignored."""
    return await store.create_blog(body)


@router.delete("/{blog_id}")
async def delete_blog(
    blog_id: int = Path(ge=1, le=MAX_BLOG_ID),
    store: BlogStore = Depends(get_blog_store),
):
    await store.delete_blog(blog_id)
    return {"message": "Blog deleted"}


@router.post("/{blog_id}/like")
async def like_blog(
    blog_id: int = Path(ge=1, le=MAX_BLOG_ID),
    store: BlogStore = Depends(get_blog_store),
):
    await store.like_blog(blog_id)
    return {"message": "Blog liked"}


@router.post("/{blog_id}/comment")
async def comment_blog(
    body: CommentPayload,
    blog_id: int = Path(ge=1, le=MAX_BLOG_ID),
    store: BlogStore = Depends(get_blog_store),
):
    await store.comment_blog(blog_id, body)
    return {"message": "Comment added"}
