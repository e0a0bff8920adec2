"""Payload Decoding - turn raw store inputs into validated schemas.

Invariants:
    - Decoding happens before any guard is taken or any collection is touched
    - pydantic.ValidationError never escapes; it becomes PayloadValidationError
    - Blog ids must be ints in 1..MAX_BLOG_ID (bool rejected); larger ids
      cannot be stored, so they are bad input rather than missing blogs
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from blog_api.core.domain_types import MAX_BLOG_ID, BlogId
from blog_api.core.errors import PayloadValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def decode_payload(schema: type[SchemaT], payload: Any) -> SchemaT:
    """Validate payload against schema; schema instances pass through."""
    if isinstance(payload, schema):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump()
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        field = ".".join(str(loc) for loc in first.get("loc", ())) or None
        raise PayloadValidationError(
            f"Invalid {schema.__name__} payload: {first.get('msg', 'undecodable')}",
            field=field,
        )


def decode_blog_id(blog_id: Any) -> BlogId:
    if isinstance(blog_id, bool) or not isinstance(blog_id, int):
        raise PayloadValidationError("Invalid blog ID", field="id")
    if not 1 <= blog_id <= MAX_BLOG_ID:
        raise PayloadValidationError("Blog ID out of range", field="id")
    return BlogId(blog_id)
