"""Deliver a matched response and log the outgoing message."""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.services.menu_renderer import MenuRenderer
from app.infrastructure.zapi_client import MessageSender
from app.persistence.models.whatsapp_bot import WhatsappBot
from app.persistence.models.whatsapp_message import MessageDirection
from app.persistence.models.whatsapp_response import ResponseType, WhatsappResponse
from app.persistence.repositories.message_repository import MessageRepository

logger = logging.getLogger(__name__)


class ResponseDispatcher:
    """Renders a response, sends it and records the outgoing message.

    ``dispatch`` never raises: a failed send is logged and leaves no
    outgoing record, so sibling messages in a batch are unaffected.
    """

    def __init__(self, session: AsyncSession, sender: MessageSender) -> None:
        self.sender = sender
        self.menu_renderer = MenuRenderer(session)
        self.message_repo = MessageRepository(session)

    async def render(self, bot_id: uuid.UUID, response: WhatsappResponse) -> str:
        """Build the outbound text for a response. Empty means nothing to send."""
        if response.response_type == ResponseType.MENU:
            if response.menu_id is None:
                logger.info(f"Menu response {response.id} has no menu")
                return ""
            return await self.menu_renderer.render(response.menu_id, bot_id=bot_id)

        if response.response_type == ResponseType.TEXT:
            return response.response_text or ""

        logger.info(f"Unsupported response type {response.response_type!r} for response {response.id}")
        return ""

    async def dispatch(
        self,
        bot: WhatsappBot,
        contact_id: uuid.UUID,
        phone: str,
        response: WhatsappResponse,
    ) -> None:
        """Send the response to ``phone``.

        Args:
            bot: Bot that owns the conversation
            contact_id: Contact ID for the message log
            phone: Recipient phone
            response: Response selected by the rule evaluator
        """
        try:
            text = await self.render(bot.id, response)
        except Exception as e:
            logger.error(f"Failed to render response {response.id}: {e}", exc_info=True)
            return

        if not text:
            logger.info(f"Empty reply for response {response.id}, nothing sent")
            return

        try:
            result = await self.sender.send_text(phone, text)
        except Exception as e:
            logger.error(f"Z-API send failed for bot {bot.id} to {phone}: {e}", exc_info=True)
            return

        try:
            await self.message_repo.create(
                bot.id,
                contact_id=contact_id,
                phone=phone,
                message_id=result.message_id,
                direction=MessageDirection.OUTGOING,
                message_text=text,
                message_type=response.response_type,
            )
        except Exception as e:
            logger.error(f"Failed to log outgoing message for bot {bot.id}: {e}", exc_info=True)
            return

        logger.info(f"Reply sent to {phone} for bot {bot.id}")
