"""WhatsApp response template service."""

import logging
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationFailedError
from app.domain.services.ownership_service import OwnershipService
from app.persistence.models.whatsapp_response import ResponseType, WhatsappResponse
from app.persistence.repositories.menu_repository import MenuRepository
from app.persistence.repositories.response_repository import ResponseRepository

logger = logging.getLogger(__name__)


class ResponseService:
    """Service for response CRUD, scoped to the acting enterprise."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize response service."""
        self.session = session
        self.response_repo = ResponseRepository(session)
        self.menu_repo = MenuRepository(session)
        self.ownership = OwnershipService(session)

    async def _validate(
        self, bot_id: uuid.UUID, response_type: str, menu_id: uuid.UUID | None
    ) -> None:
        if response_type == ResponseType.MENU and menu_id is None:
            raise ValidationFailedError("menu_id is required for menu responses")
        if menu_id is not None and await self.menu_repo.get_by_id(bot_id, menu_id) is None:
            raise ValidationFailedError("Menu not found for this bot")

    async def list_responses(
        self, enterprise_id: uuid.UUID, bot_id: uuid.UUID
    ) -> list[WhatsappResponse]:
        """List a bot's responses, oldest first."""
        await self.ownership.get_bot(enterprise_id, bot_id)
        return await self.response_repo.list_for_bot(bot_id)

    async def create_response(
        self,
        enterprise_id: uuid.UUID,
        bot_id: uuid.UUID,
        response_type: str = ResponseType.TEXT,
        response_text: str | None = None,
        menu_id: uuid.UUID | None = None,
    ) -> WhatsappResponse:
        """Create a response.

        Raises:
            ValidationFailedError: If a menu response has no menu or the
                menu does not belong to the bot
        """
        await self.ownership.get_bot(enterprise_id, bot_id)
        await self._validate(bot_id, response_type, menu_id)

        response = await self.response_repo.create(
            bot_id,
            response_type=response_type,
            response_text=response_text or None,
            menu_id=menu_id,
        )
        logger.info(f"Created {response_type} response {response.id} for bot {bot_id}")
        return response

    async def update_response(
        self, enterprise_id: uuid.UUID, response_id: uuid.UUID, **fields: Any
    ) -> WhatsappResponse:
        """Partially update a response. The merged result is validated."""
        response = await self.ownership.get_response(enterprise_id, response_id)
        await self._validate(
            response.bot_id,
            fields.get("response_type", response.response_type),
            fields.get("menu_id", response.menu_id),
        )
        if "response_text" in fields:
            fields["response_text"] = fields["response_text"] or None
        return await self.response_repo.update(response.bot_id, response.id, **fields)
