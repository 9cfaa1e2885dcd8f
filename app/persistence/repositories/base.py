"""Base repository with bot-scoped queries."""

import uuid
from typing import Generic, TypeVar, Type

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with query methods scoped to a single bot.

    Every bot-owned table carries a ``bot_id`` column. Passing ``bot_id=None``
    skips the scope and is reserved for lookups that establish the scope
    in the first place.
    """

    scope_column = "bot_id"

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """Initialize repository with model and session."""
        self.model = model
        self.session = session

    def _scoped(self, stmt, scope_id: uuid.UUID | None):
        if scope_id is None:
            return stmt
        return stmt.where(getattr(self.model, self.scope_column) == scope_id)

    async def get_by_id(self, scope_id: uuid.UUID | None, id: uuid.UUID) -> ModelType | None:
        """Get entity by ID, scoped to its owner."""
        stmt = self._scoped(select(self.model).where(self.model.id == id), scope_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self,
        scope_id: uuid.UUID | None,
        skip: int = 0,
        limit: int = 100,
        **filters
    ) -> list[ModelType]:
        """List entities, scoped to their owner."""
        stmt = self._scoped(select(self.model), scope_id)

        # Apply additional filters
        for key, value in filters.items():
            if hasattr(self.model, key):
                stmt = stmt.where(getattr(self.model, key) == value)

        stmt = stmt.offset(skip).limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, scope_id: uuid.UUID | None, **data) -> ModelType:
        """Create new entity under its owner."""
        if scope_id is not None:
            data[self.scope_column] = scope_id
        instance = self.model(**data)
        self.session.add(instance)
        await self.session.commit()
        await self.session.refresh(instance)
        return instance

    async def update(self, scope_id: uuid.UUID | None, id: uuid.UUID, **data) -> ModelType | None:
        """Update entity, scoped to its owner."""
        instance = await self.get_by_id(scope_id, id)
        if instance is None:
            return None

        for key, value in data.items():
            setattr(instance, key, value)

        await self.session.commit()
        await self.session.refresh(instance)
        return instance

    async def delete(self, scope_id: uuid.UUID | None, id: uuid.UUID) -> bool:
        """Delete entity, scoped to its owner."""
        instance = await self.get_by_id(scope_id, id)
        if instance is None:
            return False

        await self.session.delete(instance)
        await self.session.commit()
        return True
