"""ORM Models - SQLAlchemy declarative models for the two collections.

Invariants:
    - All models inherit from Base (db/base.py)
    - One table per logical collection: blogs, users

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from blog_api.models.blog import BlogRecord  # noqa: F401
from blog_api.models.user import UserRecord  # noqa: F401
