"""WhatsApp response template endpoints."""

import uuid

from fastapi import APIRouter, status

from app.api.deps import CurrentEnterprise, DbSession
from app.api.schemas.whatsapp import ResponseCreate, ResponseTemplateResponse, ResponseUpdate
from app.domain.services.response_service import ResponseService

router = APIRouter()


@router.get("/bots/{bot_id}/responses", response_model=list[ResponseTemplateResponse])
async def list_responses(
    bot_id: uuid.UUID,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> list[ResponseTemplateResponse]:
    """List a bot's response templates."""
    responses = await ResponseService(db).list_responses(enterprise_id, bot_id)
    return [ResponseTemplateResponse.model_validate(r) for r in responses]


@router.post(
    "/bots/{bot_id}/responses",
    response_model=ResponseTemplateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_response(
    bot_id: uuid.UUID,
    data: ResponseCreate,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> ResponseTemplateResponse:
    """Create a response template. Menu responses need a menu of the same bot."""
    response = await ResponseService(db).create_response(enterprise_id, bot_id, **data.model_dump())
    return ResponseTemplateResponse.model_validate(response)


@router.patch("/responses/{response_id}", response_model=ResponseTemplateResponse)
async def update_response(
    response_id: uuid.UUID,
    data: ResponseUpdate,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> ResponseTemplateResponse:
    """Partially update a response template."""
    fields = data.model_dump(exclude_unset=True)
    if fields.get("response_type") is None:
        fields.pop("response_type", None)
    response = await ResponseService(db).update_response(enterprise_id, response_id, **fields)
    return ResponseTemplateResponse.model_validate(response)
