"""Evaluate a bot's triggers against inbound text."""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.services.trigger_matcher import matches
from app.persistence.models.whatsapp_response import WhatsappResponse
from app.persistence.repositories.response_repository import ResponseRepository
from app.persistence.repositories.trigger_repository import TriggerRepository

logger = logging.getLogger(__name__)


class RuleEvaluator:
    """First-match evaluation over active triggers, lowest priority first."""

    def __init__(self, session: AsyncSession) -> None:
        self.trigger_repo = TriggerRepository(session)
        self.response_repo = ResponseRepository(session)

    async def evaluate(self, bot_id: uuid.UUID, message_text: str) -> WhatsappResponse | None:
        """Find the response for a message.

        Triggers are tried in (priority, created_at) order and the first match
        wins, so the result is deterministic for a given trigger set.

        Args:
            bot_id: Bot ID
            message_text: Inbound message text

        Returns:
            Response linked to the first matching trigger, or None
        """
        triggers = await self.trigger_repo.list_active_ordered(bot_id)

        matched = next(
            (
                trigger
                for trigger in triggers
                if matches(message_text, trigger.trigger_text, trigger.match_type)
            ),
            None,
        )
        if matched is None:
            logger.info(f"No trigger matched for bot {bot_id}")
            return None

        response = await self.response_repo.get_by_id(bot_id, matched.response_id)
        if response is None:
            logger.info(f"Response {matched.response_id} not found for trigger {matched.id}")
            return None

        logger.info(f"Trigger {matched.id} matched, response {response.id}")
        return response
