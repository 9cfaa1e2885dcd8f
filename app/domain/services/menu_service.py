"""WhatsApp menu management service."""

import logging
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ValidationFailedError
from app.domain.services.menu_renderer import render_menu
from app.domain.services.ownership_service import OwnershipService
from app.persistence.models.whatsapp_menu import WhatsappMenu
from app.persistence.repositories.menu_repository import MenuRepository
from app.persistence.repositories.response_repository import ResponseRepository

logger = logging.getLogger(__name__)


class MenuService:
    """Service for menus and their options."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize menu service."""
        self.session = session
        self.menu_repo = MenuRepository(session)
        self.response_repo = ResponseRepository(session)
        self.ownership = OwnershipService(session)

    async def _check_options(self, bot_id: uuid.UUID, options: list[dict[str, Any]]) -> None:
        for option in options:
            response_id = option.get("response_id")
            if response_id is not None and await self.response_repo.get_by_id(bot_id, response_id) is None:
                raise ValidationFailedError("Option response not found for this bot")

    async def list_menus(self, enterprise_id: uuid.UUID, bot_id: uuid.UUID) -> list[WhatsappMenu]:
        """List a bot's menus with ordered options."""
        await self.ownership.get_bot(enterprise_id, bot_id)
        return await self.menu_repo.list_with_options(bot_id)

    async def create_menu(
        self,
        enterprise_id: uuid.UUID,
        bot_id: uuid.UUID,
        title: str,
        description: str | None = None,
        options: list[dict[str, Any]] | None = None,
    ) -> WhatsappMenu:
        """Create a menu.

        Args:
            enterprise_id: Acting enterprise
            bot_id: Bot ID
            title: Menu title, rendered in bold
            description: Optional text shown under the title
            options: Option dicts (option_text, option_value, response_id, order)

        Returns:
            Created menu with options
        """
        await self.ownership.get_bot(enterprise_id, bot_id)
        options = options or []
        await self._check_options(bot_id, options)

        menu = await self.menu_repo.create_with_options(bot_id, title, description or None, options)
        logger.info(f"Created menu {menu.id} with {len(options)} option(s) for bot {bot_id}")
        return menu

    async def update_menu(
        self,
        enterprise_id: uuid.UUID,
        menu_id: uuid.UUID,
        options: list[dict[str, Any]] | None = None,
        **fields: Any,
    ) -> WhatsappMenu:
        """Update title/description; ``options`` replaces the option list."""
        menu = await self.ownership.get_menu(enterprise_id, menu_id)
        if options is not None:
            await self._check_options(menu.bot_id, options)
        if "description" in fields:
            fields["description"] = fields["description"] or None
        return await self.menu_repo.update_with_options(
            menu.bot_id, menu.id, options=options, **fields
        )

    async def delete_menu(self, enterprise_id: uuid.UUID, menu_id: uuid.UUID) -> None:
        """Delete a menu and its options."""
        menu = await self.ownership.get_menu(enterprise_id, menu_id)
        await self.response_repo.clear_menu(menu.bot_id, menu.id)
        await self.menu_repo.delete(menu.bot_id, menu.id)
        logger.info(f"Deleted menu {menu_id}")

    async def preview_menu(self, enterprise_id: uuid.UUID, menu_id: uuid.UUID) -> str:
        """Render the menu exactly as it would be sent on WhatsApp."""
        menu = await self.ownership.get_menu(enterprise_id, menu_id)
        return render_menu(menu)
