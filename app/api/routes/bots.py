"""WhatsApp bot configuration endpoints."""

import uuid

from fastapi import APIRouter, status

from app.api.deps import CurrentEnterprise, DbSession
from app.api.schemas.whatsapp import BotCreate, BotResponse, BotUpdate
from app.domain.services.bot_service import BotService
from app.persistence.models.whatsapp_bot import WhatsappBot

router = APIRouter()


def _mask_token(token: str | None) -> str:
    if not token:
        return ""
    return f"****{token[-4:]}" if len(token) > 4 else "****"


def _to_response(bot: WhatsappBot) -> BotResponse:
    return BotResponse(
        id=bot.id,
        project_id=bot.project_id,
        instance_id=bot.instance_id,
        api_token_hint=_mask_token(bot.api_token),
        webhook_url=bot.webhook_url,
        status=bot.status,
        created_at=bot.created_at,
        updated_at=bot.updated_at,
    )


@router.get("/projects/{project_id}/bot", response_model=BotResponse)
async def get_project_bot(
    project_id: uuid.UUID,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> BotResponse:
    """Get the bot configured for a project."""
    bot = await BotService(db).get_project_bot(enterprise_id, project_id)
    return _to_response(bot)


@router.post(
    "/projects/{project_id}/bot",
    response_model=BotResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_bot(
    project_id: uuid.UUID,
    data: BotCreate,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> BotResponse:
    """Create the project's bot. A project can only have one."""
    bot = await BotService(db).create_bot(
        enterprise_id,
        project_id,
        instance_id=data.instance_id,
        api_token=data.api_token,
        webhook_url=str(data.webhook_url) if data.webhook_url else None,
        status=data.status,
    )
    return _to_response(bot)


@router.patch("/bots/{bot_id}", response_model=BotResponse)
async def update_bot(
    bot_id: uuid.UUID,
    data: BotUpdate,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> BotResponse:
    """Update bot settings. Activating the bot starts replying to messages."""
    fields = data.model_dump(mode="json", exclude_unset=True)
    # Only webhook_url may be cleared
    fields = {k: v for k, v in fields.items() if v is not None or k == "webhook_url"}
    bot = await BotService(db).update_bot(enterprise_id, bot_id, **fields)
    return _to_response(bot)
