"""WhatsApp response repository."""

import uuid

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.models.whatsapp_response import WhatsappResponse
from app.persistence.repositories.base import BaseRepository


class ResponseRepository(BaseRepository[WhatsappResponse]):
    """Repository for WhatsappResponse entities."""

    def __init__(self, session: AsyncSession):
        """Initialize response repository."""
        super().__init__(WhatsappResponse, session)

    async def list_for_bot(self, bot_id: uuid.UUID) -> list[WhatsappResponse]:
        """List responses for a bot, oldest first."""
        stmt = (
            select(WhatsappResponse)
            .where(WhatsappResponse.bot_id == bot_id)
            .order_by(WhatsappResponse.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def clear_menu(self, bot_id: uuid.UUID, menu_id: uuid.UUID) -> None:
        """Detach responses from a menu that is about to be deleted. Does not commit."""
        stmt = (
            update(WhatsappResponse)
            .where(WhatsappResponse.bot_id == bot_id, WhatsappResponse.menu_id == menu_id)
            .values(menu_id=None)
        )
        await self.session.execute(stmt)
