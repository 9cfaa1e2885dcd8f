"""Profile repository."""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.models.enterprise import Profile
from app.persistence.repositories.base import BaseRepository


class ProfileRepository(BaseRepository[Profile]):
    """Repository for Profile entities, scoped by enterprise."""

    scope_column = "enterprise_id"

    def __init__(self, session: AsyncSession):
        """Initialize profile repository."""
        super().__init__(Profile, session)

    async def get_active(self, profile_id: uuid.UUID) -> Profile | None:
        """Get a profile by its auth user id, only if active."""
        stmt = select(Profile).where(Profile.id == profile_id, Profile.status == "active")
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
