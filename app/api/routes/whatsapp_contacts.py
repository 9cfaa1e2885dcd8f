"""WhatsApp contacts and message log endpoints (read only)."""

import uuid
from typing import Annotated

from fastapi import APIRouter, Query

from app.api.deps import CurrentEnterprise, DbSession
from app.api.schemas.whatsapp import WhatsappContactResponse, WhatsappMessageResponse
from app.domain.services.ownership_service import OwnershipService
from app.persistence.repositories.contact_repository import ContactRepository
from app.persistence.repositories.message_repository import MessageRepository

router = APIRouter()


@router.get("/bots/{bot_id}/contacts", response_model=list[WhatsappContactResponse])
async def list_contacts(
    bot_id: uuid.UUID,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
    skip: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=500)] = 100,
) -> list[WhatsappContactResponse]:
    """List contacts, most recent interaction first."""
    await OwnershipService(db).get_bot(enterprise_id, bot_id)
    contacts = await ContactRepository(db).list_recent(bot_id, skip=skip, limit=limit)
    return [WhatsappContactResponse.model_validate(c) for c in contacts]


@router.get("/bots/{bot_id}/messages", response_model=list[WhatsappMessageResponse])
async def list_messages(
    bot_id: uuid.UUID,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
    contact_id: uuid.UUID | None = None,
    phone: str | None = None,
    skip: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=500)] = 100,
) -> list[WhatsappMessageResponse]:
    """Message log, newest first."""
    await OwnershipService(db).get_bot(enterprise_id, bot_id)
    messages = await MessageRepository(db).list_for_bot(
        bot_id, contact_id=contact_id, phone=phone, skip=skip, limit=limit
    )
    return [WhatsappMessageResponse.model_validate(m) for m in messages]
