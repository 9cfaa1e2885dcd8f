"""WhatsApp trigger endpoints."""

import uuid

from fastapi import APIRouter, status

from app.api.deps import CurrentEnterprise, DbSession
from app.api.schemas.whatsapp import TriggerCreate, TriggerResponse, TriggerUpdate
from app.domain.services.trigger_service import TriggerService

router = APIRouter()


@router.get("/bots/{bot_id}/triggers", response_model=list[TriggerResponse])
async def list_triggers(
    bot_id: uuid.UUID,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> list[TriggerResponse]:
    """List a bot's triggers in the order they are evaluated."""
    triggers = await TriggerService(db).list_triggers(enterprise_id, bot_id)
    return [TriggerResponse.model_validate(t) for t in triggers]


@router.post(
    "/bots/{bot_id}/triggers",
    response_model=TriggerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_trigger(
    bot_id: uuid.UUID,
    data: TriggerCreate,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> TriggerResponse:
    """Create a trigger."""
    trigger = await TriggerService(db).create_trigger(enterprise_id, bot_id, **data.model_dump())
    return TriggerResponse.model_validate(trigger)


@router.patch("/triggers/{trigger_id}", response_model=TriggerResponse)
async def update_trigger(
    trigger_id: uuid.UUID,
    data: TriggerUpdate,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> TriggerResponse:
    """Partially update a trigger."""
    fields = data.model_dump(exclude_unset=True, exclude_none=True)
    trigger = await TriggerService(db).update_trigger(enterprise_id, trigger_id, **fields)
    return TriggerResponse.model_validate(trigger)


@router.delete("/triggers/{trigger_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_trigger(
    trigger_id: uuid.UUID,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> None:
    """Delete a trigger."""
    await TriggerService(db).delete_trigger(enterprise_id, trigger_id)
