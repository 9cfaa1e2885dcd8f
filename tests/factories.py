"""Test data builders and fakes."""

import uuid

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import create_access_token
from app.infrastructure.zapi_client import MessageSender, SendResult
from app.persistence.models.enterprise import Enterprise, Profile
from app.persistence.models.project import Project
from app.persistence.models.whatsapp_bot import BotStatus, WhatsappBot
from app.persistence.models.whatsapp_menu import WhatsappMenu, WhatsappMenuOption
from app.persistence.models.whatsapp_response import ResponseType, WhatsappResponse
from app.persistence.models.whatsapp_trigger import MatchType, WhatsappTrigger


class FakeSender(MessageSender):
    """Records sends instead of calling Z-API."""

    def __init__(self, fail_for: set[str] | None = None) -> None:
        self.sent: list[tuple[str, str]] = []
        self.fail_for = fail_for or set()

    async def send_text(self, phone: str, message: str) -> SendResult:
        if phone in self.fail_for:
            raise httpx.ConnectError("Z-API unreachable")
        self.sent.append((phone, message))
        return SendResult(message_id=f"out-{len(self.sent)}", raw_response={})


async def create_enterprise(session: AsyncSession, name: str = "Acme") -> Enterprise:
    enterprise = Enterprise(
        name=name,
        cep="01001-000",
        address="Praça da Sé",
        number="1",
        city="São Paulo",
        state="SP",
        phone_number="+5511999990000",
        register="12345678000190",
    )
    session.add(enterprise)
    await session.commit()
    return enterprise


async def create_profile(session: AsyncSession, enterprise: Enterprise) -> Profile:
    profile = Profile(
        id=uuid.uuid4(),
        email=f"{uuid.uuid4().hex[:8]}@example.com",
        name="Ana",
        phone="+5511988887777",
        enterprise_id=enterprise.id,
    )
    session.add(profile)
    await session.commit()
    return profile


async def create_project(session: AsyncSession, enterprise: Enterprise) -> Project:
    project = Project(
        name="Loja",
        category="ecommerce",
        slug=f"loja-{uuid.uuid4().hex[:6]}",
        enterprise_id=enterprise.id,
    )
    session.add(project)
    await session.commit()
    return project


async def create_bot(
    session: AsyncSession,
    project: Project,
    instance_id: str = "INSTANCE-1",
    status: str = BotStatus.ACTIVE,
) -> WhatsappBot:
    bot = WhatsappBot(
        project_id=project.id,
        instance_id=instance_id,
        api_token="token-abcdef",
        status=status,
    )
    session.add(bot)
    await session.commit()
    return bot


def auth_headers(profile: Profile) -> dict[str, str]:
    token = create_access_token({"sub": str(profile.id)})
    return {"Authorization": f"Bearer {token}"}


async def create_response(
    session: AsyncSession,
    bot: WhatsappBot,
    text: str | None = "Olá! Como posso ajudar?",
    response_type: str = ResponseType.TEXT,
    menu: WhatsappMenu | None = None,
) -> WhatsappResponse:
    response = WhatsappResponse(
        bot_id=bot.id,
        response_type=response_type,
        response_text=text,
        menu_id=menu.id if menu else None,
    )
    session.add(response)
    await session.commit()
    return response


async def create_trigger(
    session: AsyncSession,
    bot: WhatsappBot,
    response: WhatsappResponse,
    text: str = "oi",
    match_type: str = MatchType.EXACT,
    priority: int = 0,
    is_active: bool = True,
) -> WhatsappTrigger:
    trigger = WhatsappTrigger(
        bot_id=bot.id,
        trigger_text=text,
        match_type=match_type,
        priority=priority,
        response_id=response.id,
        is_active=is_active,
    )
    session.add(trigger)
    await session.commit()
    return trigger


async def create_menu(
    session: AsyncSession,
    bot: WhatsappBot,
    title: str = "Ajuda",
    description: str | None = "Escolha:",
    options: tuple[tuple[str, int], ...] = (("Suporte", 0), ("Vendas", 1)),
) -> WhatsappMenu:
    menu = WhatsappMenu(bot_id=bot.id, title=title, description=description)
    menu.options = [
        WhatsappMenuOption(option_text=text, option_value=str(order), order=order)
        for text, order in options
    ]
    session.add(menu)
    await session.commit()
    return menu


def zapi_message(**overrides) -> dict:
    """A Z-API ReceivedCallback payload for one text message."""
    payload = {
        "isStatusReply": False,
        "connectedPhone": "5511900000000",
        "isEdit": False,
        "isGroup": False,
        "isNewsletter": False,
        "instanceId": "INSTANCE-1",
        "messageId": uuid.uuid4().hex.upper(),
        "phone": "5511987654321",
        "fromMe": False,
        "momment": 1735689600000,
        "status": "RECEIVED",
        "chatName": "Maria",
        "senderPhoto": None,
        "senderName": "Maria Silva",
        "broadcast": False,
        "forwarded": False,
        "type": "ReceivedCallback",
        "fromApi": False,
        "text": {"message": "oi"},
    }
    payload.update(overrides)
    return payload
