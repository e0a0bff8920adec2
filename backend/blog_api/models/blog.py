"""Blog ORM - persists blog posts with their embedded comments.

Invariants:
    - pk is a storage-only surrogate key; it never appears in records
    - id is the store-assigned blog identifier (indexed, uniqueness owned by BlogStore)
    - comments is an ordered JSON list of {"author", "content"} objects

Design Decisions:
    - JSON column for comments: comments have no identity of their own and are
      only ever read and written together with their blog
    - Text columns for title, author: the API puts no length limit on them
    - BIGINT likes: accepts every value BlogDraft accepts (0..MAX_LIKES)
    - No UNIQUE constraint on id: duplicate ids after a restart are a known gap
      left to the seed_blog_ids_from_store setting, not masked by the database
"""

from sqlalchemy import BigInteger, Integer, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.db.base import Base


class BlogRecord(Base):
    """Blog post row."""
    __tablename__ = "blogs"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    author: Mapped[str] = mapped_column(Text, nullable=False, default="")
    likes: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    comments: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
