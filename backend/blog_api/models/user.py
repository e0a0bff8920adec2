"""User ORM - persists credential pairs.

Invariants:
    - username is unique
    - password is plaintext, compared verbatim
    - Text columns: credentials have no length limit beyond non-empty
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.db.base import Base


class UserRecord(Base):
    """User credential row."""
    __tablename__ = "users"

    pk: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        Text, nullable=False, unique=True, index=True,
    )
    password: Mapped[str] = mapped_column(Text, nullable=False)
