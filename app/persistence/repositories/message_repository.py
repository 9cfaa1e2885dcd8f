"""WhatsApp message repository."""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.models.whatsapp_message import WhatsappMessage
from app.persistence.repositories.base import BaseRepository


class MessageRepository(BaseRepository[WhatsappMessage]):
    """Repository for WhatsappMessage entities. Messages are never updated."""

    def __init__(self, session: AsyncSession):
        """Initialize message repository."""
        super().__init__(WhatsappMessage, session)

    async def list_for_bot(
        self,
        bot_id: uuid.UUID,
        contact_id: uuid.UUID | None = None,
        phone: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[WhatsappMessage]:
        """List messages for a bot, newest first.

        Args:
            bot_id: Bot ID
            contact_id: Optional contact filter
            phone: Optional phone filter
            skip: Number of records to skip
            limit: Maximum records to return

        Returns:
            List of messages
        """
        stmt = select(WhatsappMessage).where(WhatsappMessage.bot_id == bot_id)
        if contact_id is not None:
            stmt = stmt.where(WhatsappMessage.contact_id == contact_id)
        if phone is not None:
            stmt = stmt.where(WhatsappMessage.phone == phone)
        stmt = (
            stmt.order_by(WhatsappMessage.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
