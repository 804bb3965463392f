"""SQL Document Store - DocumentStore protocol over one ORM model.

Invariants:
    - Each call runs in its own session and commits before returning (atomic per call)
    - Rows leave this module as plain dicts keyed by column name
    - Selectors match by exact equality; an empty selector matches every row
    - find() returns rows in insertion order (created_at)
    - A selector field the model does not have raises ValidationError
"""

from uuid import UUID

from sqlalchemy import select, delete, update, func

from vocabulary.core.document_schema import FieldViolation
from vocabulary.core.errors import ValidationError
from vocabulary.db.base import Base
from vocabulary.infrastructure.database import DatabaseSessionManager


class SqlDocumentStore:
    """Document store for a single table."""

    def __init__(self, manager: DatabaseSessionManager, model: type[Base]):
        self._manager = manager
        self._model = model
        self._columns = [c.name for c in model.__table__.columns]

    def _column(self, field: str):
        if field not in self._columns:
            raise ValidationError(
                self._model.__tablename__,
                [FieldViolation(field, "unknown_field", "Not a stored field")],
            )
        return getattr(self._model, field)

    def _conditions(self, selector: dict) -> list:
        return [self._column(field) == value for field, value in selector.items()]

    def _to_dict(self, row: Base) -> dict:
        return {name: getattr(row, name) for name in self._columns}

    async def insert(self, doc: dict) -> UUID:
        async with self._manager.session() as db:
            row = self._model(**doc)
            db.add(row)
            await db.commit()
            return row.id

    async def find(self, selector: dict) -> list[dict]:
        query = (
            select(self._model)
            .where(*self._conditions(selector))
            .order_by(self._model.created_at)
        )
        async with self._manager.session() as db:
            result = await db.execute(query)
            return [self._to_dict(row) for row in result.scalars().all()]

    async def count(self, selector: dict) -> int:
        query = (
            select(func.count())
            .select_from(self._model)
            .where(*self._conditions(selector))
        )
        async with self._manager.session() as db:
            result = await db.execute(query)
            return result.scalar_one()

    async def update(self, doc_id: UUID, patch: dict) -> int:
        if not patch:
            return 0
        for field in patch:
            self._column(field)
        query = (
            update(self._model)
            .where(self._model.id == doc_id)
            .values(**patch)
        )
        async with self._manager.session() as db:
            result = await db.execute(query)
            await db.commit()
            return result.rowcount

    async def remove(self, selector: dict) -> int:
        query = delete(self._model).where(*self._conditions(selector))
        async with self._manager.session() as db:
            result = await db.execute(query)
            await db.commit()
            return result.rowcount
