"""WhatsApp bot configuration schemas."""

import uuid
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, Field, HttpUrl

BotStatusLiteral = Literal["active", "inactive"]
MatchTypeLiteral = Literal["exact", "contains", "starts_with", "regex"]
ResponseTypeLiteral = Literal["text", "menu", "flow"]


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# An empty string clears the URL
WebhookUrl = Annotated[HttpUrl | None, BeforeValidator(_blank_to_none)]


# ============== Bots ==============

class BotCreate(BaseModel):
    """Bot creation request."""

    instance_id: str = Field(min_length=1)
    api_token: str = Field(min_length=1)
    webhook_url: WebhookUrl = None
    status: BotStatusLiteral = "inactive"


class BotUpdate(BaseModel):
    """Bot update request. Omitted fields are left unchanged."""

    instance_id: str | None = Field(default=None, min_length=1)
    api_token: str | None = Field(default=None, min_length=1)
    webhook_url: WebhookUrl = None
    status: BotStatusLiteral | None = None


class BotResponse(BaseModel):
    """Bot response. The API token is never returned in full."""

    id: uuid.UUID
    project_id: uuid.UUID
    instance_id: str
    api_token_hint: str
    webhook_url: str | None
    status: str
    created_at: datetime
    updated_at: datetime


# ============== Triggers ==============

class TriggerCreate(BaseModel):
    """Trigger creation request."""

    trigger_text: str = Field(min_length=1)
    match_type: MatchTypeLiteral = "exact"
    priority: int = 0
    response_id: uuid.UUID
    is_active: bool = True


class TriggerUpdate(BaseModel):
    """Trigger update request."""

    trigger_text: str | None = Field(default=None, min_length=1)
    match_type: MatchTypeLiteral | None = None
    priority: int | None = None
    response_id: uuid.UUID | None = None
    is_active: bool | None = None


class TriggerResponse(BaseModel):
    """Trigger response."""

    id: uuid.UUID
    bot_id: uuid.UUID
    trigger_text: str
    match_type: str
    priority: int
    response_id: uuid.UUID
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ============== Responses ==============

class ResponseCreate(BaseModel):
    """Response template creation request."""

    response_type: ResponseTypeLiteral = "text"
    response_text: str | None = None
    menu_id: uuid.UUID | None = None


class ResponseUpdate(BaseModel):
    """Response template update request."""

    response_type: ResponseTypeLiteral | None = None
    response_text: str | None = None
    menu_id: uuid.UUID | None = None


class ResponseTemplateResponse(BaseModel):
    """Response template."""

    id: uuid.UUID
    bot_id: uuid.UUID
    response_type: str
    response_text: str | None
    menu_id: uuid.UUID | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ============== Menus ==============

class MenuOptionInput(BaseModel):
    """Menu option as submitted by the client."""

    option_text: str = Field(min_length=1)
    option_value: str | None = None
    response_id: uuid.UUID | None = None
    order: int | None = None


class MenuCreate(BaseModel):
    """Menu creation request."""

    title: str = Field(min_length=1)
    description: str | None = None
    options: list[MenuOptionInput] = Field(default_factory=list)


class MenuUpdate(BaseModel):
    """Menu update request. ``options``, when present, replaces all options."""

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    options: list[MenuOptionInput] | None = None


class MenuOptionResponse(BaseModel):
    """Menu option."""

    id: uuid.UUID
    option_text: str
    option_value: str | None
    response_id: uuid.UUID | None
    order: int

    class Config:
        from_attributes = True


class MenuResponse(BaseModel):
    """Menu with its options in display order."""

    id: uuid.UUID
    bot_id: uuid.UUID
    title: str
    description: str | None
    options: list[MenuOptionResponse]
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class MenuPreviewResponse(BaseModel):
    """Rendered menu text."""

    menu_id: uuid.UUID
    text: str


# ============== Contacts & messages ==============

class WhatsappContactResponse(BaseModel):
    """WhatsApp contact."""

    id: uuid.UUID
    bot_id: uuid.UUID
    phone: str
    name: str | None
    last_interaction_at: datetime | None
    created_at: datetime

    class Config:
        from_attributes = True


class WhatsappMessageResponse(BaseModel):
    """Message log entry."""

    id: uuid.UUID
    bot_id: uuid.UUID
    contact_id: uuid.UUID | None
    phone: str
    message_id: str | None
    direction: str
    message_text: str
    message_type: str
    created_at: datetime

    class Config:
        from_attributes = True
