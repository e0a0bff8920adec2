"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - BlogId is a positive int assigned by the Blog Store, never by callers
    - Record and Filter are plain dicts: the document collection speaks dicts
    - Mutation operators encoded as an Enum, no raw string matching

Design Decisions:
    - NewType over wrappers: zero runtime cost, full type-checker support
    - str Enum for operators: the enum value IS the wire key ("$inc", ...)
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

BlogId = NewType("BlogId", int)
Username = NewType("Username", str)

# blogs.id is a 32-bit INTEGER column
MAX_BLOG_ID = 2**31 - 1
# largest integer a JSON client reads exactly; likes live in a 64-bit BIGINT,
# so a draft at this cap still has room for every like it can receive
MAX_LIKES = 2**53 - 1


# ─── Document Types ──────────────────────────────────────────────

Record = dict[str, Any]
Filter = dict[str, Any]
Mutation = dict[str, dict[str, Any]]


# ─── Enums ───────────────────────────────────────────────────────

class MutationOperator(str, Enum):
    """Field update operators understood by every document collection."""
    INC = "$inc"
    PUSH = "$push"
    SET = "$set"


class StoreBackend(str, Enum):
    """Which document collection implementation backs the stores."""
    SQL = "sql"
    MEMORY = "memory"


class UserAction(str, Enum):
    """What POST /api/users does with a credential pair."""
    LOGIN = "login"
    SIGNUP = "signup"
