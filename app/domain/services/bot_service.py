"""WhatsApp bot configuration service."""

import logging
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError
from app.domain.services.ownership_service import OwnershipService
from app.persistence.models.whatsapp_bot import BotStatus, WhatsappBot
from app.persistence.repositories.bot_repository import BotRepository

logger = logging.getLogger(__name__)


class BotService:
    """Service for creating and configuring a project's bot."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize bot service."""
        self.session = session
        self.bot_repo = BotRepository(session)
        self.ownership = OwnershipService(session)

    async def get_project_bot(
        self, enterprise_id: uuid.UUID, project_id: uuid.UUID
    ) -> WhatsappBot:
        """Get the bot configured for a project.

        Raises:
            NotFoundError: If the project does not exist or has no bot
            PermissionDeniedError: If the project belongs to another enterprise
        """
        await self.ownership.get_project(enterprise_id, project_id)
        bot = await self.bot_repo.get_by_project(project_id)
        if bot is None:
            raise NotFoundError("This project has no bot configured")
        return bot

    async def create_bot(
        self,
        enterprise_id: uuid.UUID,
        project_id: uuid.UUID,
        instance_id: str,
        api_token: str,
        webhook_url: str | None = None,
        status: str = BotStatus.INACTIVE,
    ) -> WhatsappBot:
        """Create the bot for a project.

        Args:
            enterprise_id: Acting enterprise
            project_id: Project ID
            instance_id: Z-API instance ID
            api_token: Z-API instance token (stored encrypted)
            webhook_url: Optional webhook URL registered on Z-API
            status: Initial status, inactive by default

        Returns:
            Created bot

        Raises:
            ConflictError: If the project already has a bot
        """
        await self.ownership.get_project(enterprise_id, project_id)

        if await self.bot_repo.get_by_project(project_id) is not None:
            raise ConflictError("This project already has a bot configured")

        bot = await self.bot_repo.create(
            project_id,
            instance_id=instance_id,
            api_token=api_token,
            webhook_url=webhook_url or None,
            status=status,
        )
        logger.info(f"Created bot {bot.id} for project {project_id}")
        return bot

    async def update_bot(
        self, enterprise_id: uuid.UUID, bot_id: uuid.UUID, **fields: Any
    ) -> WhatsappBot:
        """Update instance_id, api_token, webhook_url or status."""
        bot = await self.ownership.get_bot(enterprise_id, bot_id)
        if "webhook_url" in fields:
            fields["webhook_url"] = fields["webhook_url"] or None
        for key, value in fields.items():
            setattr(bot, key, value)
        await self.session.commit()
        await self.session.refresh(bot)
        logger.info(f"Updated bot {bot.id}: {sorted(fields)}")
        return bot
