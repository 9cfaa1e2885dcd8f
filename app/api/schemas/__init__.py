"""API schemas package."""

from app.api.schemas.whatsapp import (
    BotCreate,
    BotResponse,
    BotUpdate,
    MenuCreate,
    MenuOptionInput,
    MenuOptionResponse,
    MenuPreviewResponse,
    MenuResponse,
    MenuUpdate,
    ResponseCreate,
    ResponseTemplateResponse,
    ResponseUpdate,
    TriggerCreate,
    TriggerResponse,
    TriggerUpdate,
    WhatsappContactResponse,
    WhatsappMessageResponse,
)

__all__ = [
    "BotCreate",
    "BotResponse",
    "BotUpdate",
    "MenuCreate",
    "MenuOptionInput",
    "MenuOptionResponse",
    "MenuPreviewResponse",
    "MenuResponse",
    "MenuUpdate",
    "ResponseCreate",
    "ResponseTemplateResponse",
    "ResponseUpdate",
    "TriggerCreate",
    "TriggerResponse",
    "TriggerUpdate",
    "WhatsappContactResponse",
    "WhatsappMessageResponse",
]
