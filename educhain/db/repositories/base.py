"""
Generic async CRUD repository.

Rows are never deleted, so there is no delete here. Updates go through
``set_fields`` and only ever touch the columns named by the caller.
"""

import uuid
from typing import Any, Generic, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from educhain.db.engine import Base

ModelT = TypeVar("ModelT", bound=Base)
CreateSchemaT = TypeVar("CreateSchemaT", bound=BaseModel)


class BaseRepository(Generic[ModelT, CreateSchemaT]):
    """Generic async create / read / count operations."""

    #: Column used for newest-first listings.
    order_column: str = "created_at"

    def __init__(self, model: Type[ModelT]):
        self.model = model

    async def create(
        self,
        db: AsyncSession,
        data: CreateSchemaT,
        **extra_fields: Any,
    ) -> ModelT:
        """Create a new record."""
        values = data.model_dump(exclude_unset=True, by_alias=False)
        values.update(extra_fields)

        obj = self.model(**values)
        db.add(obj)
        await db.flush()
        await db.refresh(obj)
        return obj

    async def get_by_id(self, db: AsyncSession, id: uuid.UUID) -> Optional[ModelT]:
        """Get a single record by ID."""
        result = await db.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def list(
        self,
        db: AsyncSession,
        offset: int = 0,
        limit: Optional[int] = 50,
        *filters: ColumnElement[bool],
    ) -> Sequence[ModelT]:
        """List records newest first, optionally filtered."""
        col = getattr(self.model, self.order_column)
        stmt = select(self.model).where(*filters).order_by(col.desc()).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await db.execute(stmt)
        return result.scalars().all()

    async def count(self, db: AsyncSession, *filters: ColumnElement[bool]) -> int:
        """Count records, optionally filtered."""
        result = await db.execute(
            select(func.count()).select_from(self.model).where(*filters)
        )
        return result.scalar_one()

    async def set_fields(
        self,
        db: AsyncSession,
        id: uuid.UUID,
        **values: Any,
    ) -> Optional[ModelT]:
        """Set columns on an existing record. Returns None if the row is missing."""
        obj = await self.get_by_id(db, id)
        if obj is None:
            return None

        for key, value in values.items():
            setattr(obj, key, value)

        await db.flush()
        await db.refresh(obj)
        return obj
