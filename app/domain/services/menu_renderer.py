"""Render WhatsApp menus as numbered text."""

import logging
import uuid
from typing import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from app.persistence.models.whatsapp_menu import WhatsappMenu, WhatsappMenuOption
from app.persistence.repositories.menu_repository import MenuRepository

logger = logging.getLogger(__name__)


def format_menu(
    title: str, description: str | None, options: Iterable[WhatsappMenuOption]
) -> str:
    """Compose menu text. ``*`` is WhatsApp bold markup.

    Options are numbered from 1 after a stable sort on ``order``.
    """
    text = f"*{title}*\n\n"
    if description:
        text += f"{description}\n\n"
    ordered = sorted(options, key=lambda option: option.order)
    for index, option in enumerate(ordered, start=1):
        text += f"{index}. {option.option_text}\n"
    return text.strip()


def render_menu(menu: WhatsappMenu) -> str:
    """Render an already loaded menu with its options."""
    return format_menu(menu.title, menu.description, menu.options)


class MenuRenderer:
    """Loads menus and renders them for delivery."""

    def __init__(self, session: AsyncSession) -> None:
        self.menu_repo = MenuRepository(session)

    async def render(self, menu_id: uuid.UUID, bot_id: uuid.UUID | None = None) -> str:
        """Render a menu by ID.

        Args:
            menu_id: Menu ID
            bot_id: Restrict the lookup to this bot's menus

        Returns:
            Menu text, or an empty string when the menu does not exist
        """
        menu = await self.menu_repo.get_with_options(bot_id, menu_id)
        if menu is None:
            logger.warning(f"Menu not found: {menu_id}")
            return ""
        return render_menu(menu)
