"""Repository implementations."""

from app.persistence.repositories.base import BaseRepository
from app.persistence.repositories.bot_repository import BotRepository
from app.persistence.repositories.contact_repository import ContactRepository
from app.persistence.repositories.menu_repository import MenuRepository
from app.persistence.repositories.message_repository import MessageRepository
from app.persistence.repositories.profile_repository import ProfileRepository
from app.persistence.repositories.project_repository import ProjectRepository
from app.persistence.repositories.response_repository import ResponseRepository
from app.persistence.repositories.trigger_repository import TriggerRepository

__all__ = [
    "BaseRepository",
    "BotRepository",
    "ContactRepository",
    "MenuRepository",
    "MessageRepository",
    "ProfileRepository",
    "ProjectRepository",
    "ResponseRepository",
    "TriggerRepository",
]
