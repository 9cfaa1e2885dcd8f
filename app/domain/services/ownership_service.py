"""Enterprise ownership checks for WhatsApp configuration resources."""

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, PermissionDeniedError
from app.persistence.models.project import Project
from app.persistence.models.whatsapp_bot import WhatsappBot
from app.persistence.models.whatsapp_menu import WhatsappMenu
from app.persistence.models.whatsapp_response import WhatsappResponse
from app.persistence.models.whatsapp_trigger import WhatsappTrigger
from app.persistence.repositories.bot_repository import BotRepository
from app.persistence.repositories.menu_repository import MenuRepository
from app.persistence.repositories.project_repository import ProjectRepository
from app.persistence.repositories.response_repository import ResponseRepository
from app.persistence.repositories.trigger_repository import TriggerRepository

logger = logging.getLogger(__name__)


class OwnershipService:
    """Resolves a resource and verifies it belongs to the acting enterprise.

    Walks Project -> Bot -> {Trigger, Response, Menu}. Unknown resources
    raise NotFoundError, resources of another enterprise raise
    PermissionDeniedError.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.project_repo = ProjectRepository(session)
        self.bot_repo = BotRepository(session)
        self.trigger_repo = TriggerRepository(session)
        self.response_repo = ResponseRepository(session)
        self.menu_repo = MenuRepository(session)

    @staticmethod
    def _check(enterprise_id: uuid.UUID, owner_id: uuid.UUID, what: str) -> None:
        if owner_id != enterprise_id:
            logger.warning(f"Enterprise {enterprise_id} denied access to {what}")
            raise PermissionDeniedError(f"You do not have permission to access this {what}")

    async def get_project(self, enterprise_id: uuid.UUID, project_id: uuid.UUID) -> Project:
        project = await self.project_repo.get_by_id(None, project_id)
        if project is None:
            raise NotFoundError("Project not found")
        self._check(enterprise_id, project.enterprise_id, "project")
        return project

    async def get_bot(self, enterprise_id: uuid.UUID, bot_id: uuid.UUID) -> WhatsappBot:
        bot = await self.bot_repo.get_with_project(bot_id)
        if bot is None:
            raise NotFoundError("Bot not found")
        self._check(enterprise_id, bot.project.enterprise_id, "bot")
        return bot

    async def get_trigger(
        self, enterprise_id: uuid.UUID, trigger_id: uuid.UUID
    ) -> WhatsappTrigger:
        trigger = await self.trigger_repo.get_by_id(None, trigger_id)
        if trigger is None:
            raise NotFoundError("Trigger not found")
        await self.get_bot(enterprise_id, trigger.bot_id)
        return trigger

    async def get_response(
        self, enterprise_id: uuid.UUID, response_id: uuid.UUID
    ) -> WhatsappResponse:
        response = await self.response_repo.get_by_id(None, response_id)
        if response is None:
            raise NotFoundError("Response not found")
        await self.get_bot(enterprise_id, response.bot_id)
        return response

    async def get_menu(self, enterprise_id: uuid.UUID, menu_id: uuid.UUID) -> WhatsappMenu:
        """Get a menu with its options after checking ownership."""
        menu = await self.menu_repo.get_with_options(None, menu_id)
        if menu is None:
            raise NotFoundError("Menu not found")
        await self.get_bot(enterprise_id, menu.bot_id)
        return menu
