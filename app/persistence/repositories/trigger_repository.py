"""WhatsApp trigger repository."""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.models.whatsapp_trigger import WhatsappTrigger
from app.persistence.repositories.base import BaseRepository


class TriggerRepository(BaseRepository[WhatsappTrigger]):
    """Repository for WhatsappTrigger entities."""

    def __init__(self, session: AsyncSession):
        """Initialize trigger repository."""
        super().__init__(WhatsappTrigger, session)

    async def list_ordered(
        self, bot_id: uuid.UUID, active_only: bool = False
    ) -> list[WhatsappTrigger]:
        """List triggers in evaluation order: priority ascending, then oldest first."""
        stmt = select(WhatsappTrigger).where(WhatsappTrigger.bot_id == bot_id)
        if active_only:
            stmt = stmt.where(WhatsappTrigger.is_active.is_(True))
        stmt = stmt.order_by(
            WhatsappTrigger.priority.asc(),
            WhatsappTrigger.created_at.asc(),
            WhatsappTrigger.id.asc(),
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_active_ordered(self, bot_id: uuid.UUID) -> list[WhatsappTrigger]:
        """List only active triggers in evaluation order."""
        return await self.list_ordered(bot_id, active_only=True)
