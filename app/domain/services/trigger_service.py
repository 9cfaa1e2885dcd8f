"""WhatsApp trigger management service."""

import logging
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationFailedError
from app.domain.services.ownership_service import OwnershipService
from app.persistence.models.whatsapp_trigger import MatchType, WhatsappTrigger
from app.persistence.repositories.response_repository import ResponseRepository
from app.persistence.repositories.trigger_repository import TriggerRepository

logger = logging.getLogger(__name__)


class TriggerService:
    """Service for trigger CRUD, scoped to the acting enterprise."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize trigger service."""
        self.session = session
        self.trigger_repo = TriggerRepository(session)
        self.response_repo = ResponseRepository(session)
        self.ownership = OwnershipService(session)

    async def _require_response(self, bot_id: uuid.UUID, response_id: uuid.UUID) -> None:
        if await self.response_repo.get_by_id(bot_id, response_id) is None:
            raise ValidationFailedError("Response not found for this bot")

    async def list_triggers(
        self, enterprise_id: uuid.UUID, bot_id: uuid.UUID
    ) -> list[WhatsappTrigger]:
        """List all triggers of a bot in evaluation order."""
        await self.ownership.get_bot(enterprise_id, bot_id)
        return await self.trigger_repo.list_ordered(bot_id)

    async def create_trigger(
        self,
        enterprise_id: uuid.UUID,
        bot_id: uuid.UUID,
        trigger_text: str,
        response_id: uuid.UUID,
        match_type: str = MatchType.EXACT,
        priority: int = 0,
        is_active: bool = True,
    ) -> WhatsappTrigger:
        """Create a trigger.

        Args:
            enterprise_id: Acting enterprise
            bot_id: Bot ID
            trigger_text: Text or pattern to match
            response_id: Response sent on match, must belong to the bot
            match_type: One of MatchType
            priority: Lower runs first
            is_active: Whether the trigger is evaluated

        Returns:
            Created trigger
        """
        await self.ownership.get_bot(enterprise_id, bot_id)
        await self._require_response(bot_id, response_id)

        trigger = await self.trigger_repo.create(
            bot_id,
            trigger_text=trigger_text,
            response_id=response_id,
            match_type=match_type,
            priority=priority,
            is_active=is_active,
        )
        logger.info(f"Created trigger {trigger.id} for bot {bot_id}")
        return trigger

    async def update_trigger(
        self, enterprise_id: uuid.UUID, trigger_id: uuid.UUID, **fields: Any
    ) -> WhatsappTrigger:
        """Partially update a trigger."""
        trigger = await self.ownership.get_trigger(enterprise_id, trigger_id)
        if fields.get("response_id") is not None:
            await self._require_response(trigger.bot_id, fields["response_id"])
        return await self.trigger_repo.update(trigger.bot_id, trigger.id, **fields)

    async def delete_trigger(self, enterprise_id: uuid.UUID, trigger_id: uuid.UUID) -> None:
        """Delete a trigger."""
        trigger = await self.ownership.get_trigger(enterprise_id, trigger_id)
        await self.trigger_repo.delete(trigger.bot_id, trigger.id)
        logger.info(f"Deleted trigger {trigger_id}")
