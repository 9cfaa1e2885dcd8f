"""Tests for the inbound message pipeline."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import func, select

from app.domain.services.inbound_message_service import InboundMessageService, UnitOutcome
from app.persistence.models.whatsapp_contact import WhatsappContact
from app.persistence.models.whatsapp_message import MessageDirection, WhatsappMessage
from app.persistence.repositories.contact_repository import ContactRepository
from tests.factories import (
    FakeSender,
    create_bot,
    create_enterprise,
    create_project,
    create_response,
    create_trigger,
    zapi_message,
)


@pytest.fixture
async def bot(db_session):
    enterprise = await create_enterprise(db_session)
    project = await create_project(db_session, enterprise)
    bot = await create_bot(db_session, project)
    response = await create_response(db_session, bot, text="Olá!")
    await create_trigger(db_session, bot, response, text="oi")
    return bot


def _service(session_factory, sender, redis=None) -> InboundMessageService:
    return InboundMessageService(session_factory, lambda bot: sender, redis=redis)


async def test_outcomes_follow_input_order(session_factory, bot):
    sender = FakeSender()
    service = _service(session_factory, sender)

    outcomes = await service.process_batch([
        zapi_message(),
        zapi_message(fromMe=True),
        zapi_message(instanceId="OTHER"),
        zapi_message(text={"message": "nada a ver"}),
        "not an object",
    ])

    assert outcomes == [
        UnitOutcome.DISPATCHED,
        UnitOutcome.SKIPPED,
        UnitOutcome.UNKNOWN_BOT,
        UnitOutcome.NO_MATCH,
        UnitOutcome.INVALID,
    ]


async def test_empty_batch(session_factory):
    assert await _service(session_factory, FakeSender()).process_batch([]) == []


async def test_duplicate_delivery_processed_once(session_factory, db_session, bot, redis_mock):
    sender = FakeSender()
    service = _service(session_factory, sender, redis=redis_mock)
    message = zapi_message(messageId="DUP-1")

    first = await service.process_batch([message])
    second = await service.process_batch([message])

    assert first == [UnitOutcome.DISPATCHED]
    assert second == [UnitOutcome.DUPLICATE]
    assert len(sender.sent) == 1
    redis_mock.setnx.assert_any_await(
        "zapi_msg_processed:INSTANCE-1:DUP-1", "1", ttl=300
    )


async def test_redis_failure_falls_back_to_processing(session_factory, bot):
    redis = AsyncMock()
    redis.setnx.side_effect = ConnectionError("redis down")
    sender = FakeSender()

    outcomes = await _service(session_factory, sender, redis=redis).process_batch([zapi_message()])

    assert outcomes == [UnitOutcome.DISPATCHED]
    assert len(sender.sent) == 1


async def test_unexpected_error_is_contained(session_factory, db_session, bot):
    def broken_factory(bot):
        raise RuntimeError("no sender")

    service = InboundMessageService(session_factory, broken_factory)

    outcomes = await service.process_batch([zapi_message(), zapi_message(fromMe=True)])

    assert outcomes == [UnitOutcome.FAILED, UnitOutcome.SKIPPED]
    # Inbound was logged before the failure and stays logged
    count = await db_session.scalar(select(func.count()).select_from(WhatsappMessage))
    assert count == 1


async def test_batch_from_same_phone_shares_one_contact(session_factory, db_session, bot):
    sender = FakeSender()
    service = _service(session_factory, sender)

    outcomes = await service.process_batch([zapi_message(), zapi_message(), zapi_message()])

    assert outcomes.count(UnitOutcome.DISPATCHED) == 3
    contacts = await db_session.scalar(select(func.count()).select_from(WhatsappContact))
    assert contacts == 1


async def test_contact_inserted_by_sibling_delivery(session_factory, db_session, bot, monkeypatch):
    """The lookup misses a contact a sibling unit inserts before we do."""
    db_session.add(WhatsappContact(bot_id=bot.id, phone="5511987654321", name="Maria"))
    await db_session.commit()

    real_get_by_phone = ContactRepository.get_by_phone
    lookups = []

    async def stale_first_lookup(self, bot_id, phone):
        lookups.append(phone)
        if len(lookups) == 1:
            return None
        return await real_get_by_phone(self, bot_id, phone)

    monkeypatch.setattr(ContactRepository, "get_by_phone", stale_first_lookup)
    sender = FakeSender()

    outcome = await _service(session_factory, sender).process_unit(zapi_message())

    assert outcome == UnitOutcome.DISPATCHED
    assert sender.sent == [("5511987654321", "Olá!")]
    assert len(lookups) == 2

    async with session_factory() as session:
        contacts = list((await session.execute(select(WhatsappContact))).scalars().all())
        messages = list((await session.execute(select(WhatsappMessage))).scalars().all())

    assert len(contacts) == 1
    assert contacts[0].name == "Maria Silva"
    assert {m.direction for m in messages} == {MessageDirection.INCOMING, MessageDirection.OUTGOING}
    assert all(m.contact_id == contacts[0].id for m in messages)
