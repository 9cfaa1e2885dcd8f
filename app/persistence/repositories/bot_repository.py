"""WhatsApp bot repository."""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.persistence.models.whatsapp_bot import WhatsappBot
from app.persistence.repositories.base import BaseRepository


class BotRepository(BaseRepository[WhatsappBot]):
    """Repository for WhatsappBot entities, scoped by project."""

    scope_column = "project_id"

    def __init__(self, session: AsyncSession):
        """Initialize bot repository."""
        super().__init__(WhatsappBot, session)

    async def get_by_instance_id(self, instance_id: str) -> WhatsappBot | None:
        """Resolve the bot that owns a Z-API instance.

        This is the only unscoped lookup: the instance id on an inbound
        webhook is what establishes the tenant for the rest of the request.
        """
        stmt = (
            select(WhatsappBot)
            .where(WhatsappBot.instance_id == instance_id)
            .order_by(WhatsappBot.created_at)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_project(self, project_id: uuid.UUID) -> WhatsappBot | None:
        """Get the bot attached to a project, if any."""
        stmt = select(WhatsappBot).where(WhatsappBot.project_id == project_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_with_project(self, bot_id: uuid.UUID) -> WhatsappBot | None:
        """Get a bot with its project loaded, for ownership checks."""
        stmt = (
            select(WhatsappBot)
            .options(selectinload(WhatsappBot.project))
            .where(WhatsappBot.id == bot_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
