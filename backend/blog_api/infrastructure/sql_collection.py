"""SQL Document Collection - DocumentCollection over one SQLAlchemy ORM table.

Invariants:
    - Each primitive runs in its own session and commits before returning
    - Records exclude the surrogate pk column; values are deep copies of row data
    - update()/delete() touch the first match in pk order and return 0 or 1
    - Filters may only name mapped columns (ValueError otherwise)

Design Decisions:
    - update() reads the row, applies the mutation with core.record_mutation, and
      writes it back. The read and write are separate statements, so atomicity
      across requests comes from the owning store's guard, not from the database
"""

import copy
from typing import Any

from sqlalchemy import select

from blog_api.core.domain_types import Filter, Mutation, Record
from blog_api.core.record_mutation import apply_mutation, validate_mutation
from blog_api.db.base import Base
from blog_api.infrastructure.database import DatabaseSessionManager

_SURROGATE_KEY = "pk"


class SqlDocumentCollection:
    """Document view over one ORM model."""

    def __init__(self, manager: DatabaseSessionManager, model: type[Base]):
        self._manager = manager
        self._model = model
        self._fields = [
            column.key for column in model.__table__.columns
            if column.key != _SURROGATE_KEY
        ]

    @property
    def fields(self) -> list[str]:
        return list(self._fields)

    async def find_one(self, filter_: Filter) -> Record | None:
        async with self._manager.session() as db:
            row = await self._first_match(db, filter_)
            return self._to_record(row) if row is not None else None

    async def find_all(self) -> list[Record]:
        async with self._manager.session() as db:
            result = await db.execute(
                select(self._model).order_by(getattr(self._model, _SURROGATE_KEY)),
            )
            return [self._to_record(row) for row in result.scalars().all()]

    async def insert(self, record: Record) -> None:
        values = {
            key: copy.deepcopy(value) for key, value in record.items()
            if key in self._fields
        }
        async with self._manager.session() as db:
            db.add(self._model(**values))
            await db.commit()

    async def update(self, filter_: Filter, mutation: Mutation) -> int:
        validate_mutation(mutation)
        async with self._manager.session() as db:
            row = await self._first_match(db, filter_)
            if row is None:
                return 0
            updated = apply_mutation(self._to_record(row), mutation)
            for key in self._fields:
                if key in updated:
                    setattr(row, key, updated[key])
            await db.commit()
            return 1

    async def delete(self, filter_: Filter) -> int:
        async with self._manager.session() as db:
            row = await self._first_match(db, filter_)
            if row is None:
                return 0
            await db.delete(row)
            await db.commit()
            return 1

    async def _first_match(self, db, filter_: Filter) -> Any:
        query = (
            select(self._model)
            .where(*self._where(filter_))
            .order_by(getattr(self._model, _SURROGATE_KEY))
            .limit(1)
        )
        result = await db.execute(query)
        return result.scalars().first()

    def _where(self, filter_: Filter) -> list:
        clauses = []
        for key, value in filter_.items():
            if key not in self._fields:
                raise ValueError(
                    f"Unknown field '{key}' for collection {self._model.__tablename__}",
                )
            clauses.append(getattr(self._model, key) == value)
        return clauses

    def _to_record(self, row: Any) -> Record:
        return {key: copy.deepcopy(getattr(row, key)) for key in self._fields}
