"""WhatsApp contact repository."""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.models.whatsapp_contact import WhatsappContact
from app.persistence.repositories.base import BaseRepository


class ContactRepository(BaseRepository[WhatsappContact]):
    """Repository for WhatsappContact entities."""

    def __init__(self, session: AsyncSession):
        """Initialize contact repository."""
        super().__init__(WhatsappContact, session)

    async def get_by_phone(self, bot_id: uuid.UUID, phone: str) -> WhatsappContact | None:
        """Get contact by phone within a bot.

        Args:
            bot_id: Bot ID
            phone: Phone number exactly as delivered by Z-API

        Returns:
            Contact or None if not found
        """
        stmt = select(WhatsappContact).where(
            WhatsappContact.bot_id == bot_id,
            WhatsappContact.phone == phone,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_recent(
        self, bot_id: uuid.UUID, skip: int = 0, limit: int = 100
    ) -> list[WhatsappContact]:
        """List contacts, most recent interaction first."""
        stmt = (
            select(WhatsappContact)
            .where(WhatsappContact.bot_id == bot_id)
            .order_by(
                WhatsappContact.last_interaction_at.desc().nulls_last(),
                WhatsappContact.created_at.desc(),
            )
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
