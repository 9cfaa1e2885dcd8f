"""Contact resolution for inbound WhatsApp messages."""

import logging
import uuid
from datetime import datetime

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.models.whatsapp_contact import WhatsappContact
from app.persistence.repositories.contact_repository import ContactRepository

logger = logging.getLogger(__name__)


class ContactResolver:
    """Upserts the contact record for a (bot, phone) pair."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize contact resolver."""
        self.session = session
        self.contact_repo = ContactRepository(session)

    async def resolve(
        self,
        bot_id: uuid.UUID,
        phone: str,
        candidate_name: str | None,
        event_timestamp: datetime,
    ) -> uuid.UUID:
        """Find or create the contact and record the interaction.

        Args:
            bot_id: Bot ID
            phone: Sender phone as delivered by the gateway
            candidate_name: Display name from the inbound event, may be empty
            event_timestamp: When the inbound event happened

        Returns:
            Contact ID
        """
        contact = await self.contact_repo.get_by_phone(bot_id, phone)
        if contact is None:
            contact = WhatsappContact(
                bot_id=bot_id,
                phone=phone,
                name=candidate_name or None,
                last_interaction_at=event_timestamp,
            )
            try:
                # Savepoint: a failed insert must not expire the caller's objects
                async with self.session.begin_nested():
                    self.session.add(contact)
            except IntegrityError:
                # A concurrent delivery created it first
                contact = await self.contact_repo.get_by_phone(bot_id, phone)
                if contact is None:
                    raise
            else:
                await self.session.commit()
                logger.info(f"Created contact {contact.id} for bot {bot_id}")
                return contact.id

        await self._touch(contact, candidate_name, event_timestamp)
        return contact.id

    async def _touch(
        self,
        contact: WhatsappContact,
        candidate_name: str | None,
        event_timestamp: datetime,
    ) -> None:
        if candidate_name:
            contact.name = candidate_name
        contact.last_interaction_at = event_timestamp
        await self.session.commit()
