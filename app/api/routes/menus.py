"""WhatsApp menu endpoints."""

import uuid
from typing import Any

from fastapi import APIRouter, status

from app.api.deps import CurrentEnterprise, DbSession
from app.api.schemas.whatsapp import (
    MenuCreate,
    MenuOptionInput,
    MenuPreviewResponse,
    MenuResponse,
    MenuUpdate,
)
from app.domain.services.menu_service import MenuService

router = APIRouter()


def _options_payload(options: list[MenuOptionInput]) -> list[dict[str, Any]]:
    """Options without an explicit order keep their position in the request."""
    payload = []
    for index, option in enumerate(options):
        data = option.model_dump()
        if data["order"] is None:
            data["order"] = index
        payload.append(data)
    return payload


@router.get("/bots/{bot_id}/menus", response_model=list[MenuResponse])
async def list_menus(
    bot_id: uuid.UUID,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> list[MenuResponse]:
    """List a bot's menus with their options."""
    menus = await MenuService(db).list_menus(enterprise_id, bot_id)
    return [MenuResponse.model_validate(m) for m in menus]


@router.post(
    "/bots/{bot_id}/menus",
    response_model=MenuResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_menu(
    bot_id: uuid.UUID,
    data: MenuCreate,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> MenuResponse:
    """Create a menu with its options."""
    menu = await MenuService(db).create_menu(
        enterprise_id,
        bot_id,
        title=data.title,
        description=data.description,
        options=_options_payload(data.options),
    )
    return MenuResponse.model_validate(menu)


@router.patch("/menus/{menu_id}", response_model=MenuResponse)
async def update_menu(
    menu_id: uuid.UUID,
    data: MenuUpdate,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> MenuResponse:
    """Update a menu. Sending ``options`` replaces the whole option list."""
    fields = data.model_dump(exclude_unset=True, exclude={"options"})
    if fields.get("title") is None:
        fields.pop("title", None)
    options = _options_payload(data.options) if data.options is not None else None
    menu = await MenuService(db).update_menu(enterprise_id, menu_id, options=options, **fields)
    return MenuResponse.model_validate(menu)


@router.delete("/menus/{menu_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_menu(
    menu_id: uuid.UUID,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> None:
    """Delete a menu and its options."""
    await MenuService(db).delete_menu(enterprise_id, menu_id)


@router.get("/menus/{menu_id}/preview", response_model=MenuPreviewResponse)
async def preview_menu(
    menu_id: uuid.UUID,
    enterprise_id: CurrentEnterprise,
    db: DbSession,
) -> MenuPreviewResponse:
    """Render the menu as it is sent on WhatsApp."""
    text = await MenuService(db).preview_menu(enterprise_id, menu_id)
    return MenuPreviewResponse(menu_id=menu_id, text=text)
