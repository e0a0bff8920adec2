"""Blog Schemas - drafts, comments and stored blog shape.

Invariants:
    - BlogDraft ignores any caller-supplied id (the store assigns ids)
    - Omitted text fields decode to "", the same zero value a stored blog has
    - likes is an integer in 0..MAX_LIKES, default 0, never coerced from strings
    - comments keep insertion order
"""

from pydantic import BaseModel, ConfigDict, Field

from blog_api.core.domain_types import MAX_LIKES


class CommentPayload(BaseModel):
    """A comment as posted to /api/blogs/{id}/comment."""
    author: str = ""
    content: str = ""


class BlogDraft(BaseModel):
    """Caller-supplied blog fields prior to id assignment."""
    model_config = ConfigDict(extra="ignore")

    title: str = ""
    content: str = ""
    author: str = ""
    likes: int = Field(0, ge=0, le=MAX_LIKES, strict=True)
    comments: list[CommentPayload] = Field(default_factory=list)


class BlogResponse(BaseModel):
    """A stored blog as returned to clients."""
    id: int
    title: str
    content: str
    author: str
    likes: int = 0
    comments: list[CommentPayload] = Field(default_factory=list)
