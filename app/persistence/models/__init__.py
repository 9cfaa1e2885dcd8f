"""Database models."""

from app.persistence.models.enterprise import Enterprise, Profile
from app.persistence.models.project import Project
from app.persistence.models.whatsapp_bot import BotStatus, WhatsappBot
from app.persistence.models.whatsapp_contact import WhatsappContact
from app.persistence.models.whatsapp_menu import WhatsappMenu, WhatsappMenuOption
from app.persistence.models.whatsapp_message import MessageDirection, WhatsappMessage
from app.persistence.models.whatsapp_response import ResponseType, WhatsappResponse
from app.persistence.models.whatsapp_trigger import MatchType, WhatsappTrigger

__all__ = [
    "Enterprise",
    "Profile",
    "Project",
    "WhatsappBot",
    "BotStatus",
    "WhatsappContact",
    "WhatsappMenu",
    "WhatsappMenuOption",
    "WhatsappMessage",
    "MessageDirection",
    "WhatsappResponse",
    "ResponseType",
    "WhatsappTrigger",
    "MatchType",
]
