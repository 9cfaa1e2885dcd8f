"""WhatsApp menu repository."""

import uuid
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.persistence.models.whatsapp_menu import WhatsappMenu, WhatsappMenuOption
from app.persistence.repositories.base import BaseRepository


class MenuRepository(BaseRepository[WhatsappMenu]):
    """Repository for WhatsappMenu entities and their options."""

    def __init__(self, session: AsyncSession):
        """Initialize menu repository."""
        super().__init__(WhatsappMenu, session)

    async def get_with_options(
        self, bot_id: uuid.UUID | None, menu_id: uuid.UUID
    ) -> WhatsappMenu | None:
        """Get a menu with its options loaded in display order.

        Args:
            bot_id: Bot ID, or None to skip the bot scope
            menu_id: Menu ID

        Returns:
            Menu or None if not found
        """
        stmt = (
            select(WhatsappMenu)
            .options(selectinload(WhatsappMenu.options))
            .where(WhatsappMenu.id == menu_id)
            .execution_options(populate_existing=True)
        )
        if bot_id is not None:
            stmt = stmt.where(WhatsappMenu.bot_id == bot_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_with_options(self, bot_id: uuid.UUID) -> list[WhatsappMenu]:
        """List all menus for a bot with their options."""
        stmt = (
            select(WhatsappMenu)
            .options(selectinload(WhatsappMenu.options))
            .where(WhatsappMenu.bot_id == bot_id)
            .order_by(WhatsappMenu.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_with_options(
        self,
        bot_id: uuid.UUID,
        title: str,
        description: str | None,
        options: list[dict[str, Any]],
    ) -> WhatsappMenu:
        """Create a menu and its options in one transaction."""
        menu = WhatsappMenu(bot_id=bot_id, title=title, description=description)
        menu.options = [WhatsappMenuOption(**option) for option in options]
        self.session.add(menu)
        await self.session.commit()
        return await self.get_with_options(bot_id, menu.id)

    async def update_with_options(
        self,
        bot_id: uuid.UUID,
        menu_id: uuid.UUID,
        options: list[dict[str, Any]] | None = None,
        **data,
    ) -> WhatsappMenu | None:
        """Update menu fields. When ``options`` is given it replaces the whole option list."""
        menu = await self.get_with_options(bot_id, menu_id)
        if menu is None:
            return None

        for key, value in data.items():
            setattr(menu, key, value)
        if options is not None:
            menu.options = [WhatsappMenuOption(**option) for option in options]

        await self.session.commit()
        return await self.get_with_options(bot_id, menu_id)

    async def delete(self, bot_id: uuid.UUID | None, menu_id: uuid.UUID) -> bool:
        """Delete a menu and its options."""
        menu = await self.get_with_options(bot_id, menu_id)
        if menu is None:
            return False

        await self.session.delete(menu)
        await self.session.commit()
        return True
