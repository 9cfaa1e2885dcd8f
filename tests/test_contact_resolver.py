"""Tests for contact resolution."""

from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select

from app.domain.services.contact_service import ContactResolver
from app.persistence.models.whatsapp_contact import WhatsappContact
from tests.factories import create_bot, create_enterprise, create_project

T0 = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


async def _bot(session, instance_id="INSTANCE-1"):
    enterprise = await create_enterprise(session)
    project = await create_project(session, enterprise)
    return await create_bot(session, project, instance_id=instance_id)


async def _contacts(session) -> list[WhatsappContact]:
    result = await session.execute(select(WhatsappContact))
    return list(result.scalars().all())


def _same_instant(a: datetime, b: datetime) -> bool:
    # SQLite drops tzinfo on read
    return a.replace(tzinfo=None) == b.replace(tzinfo=None)


async def test_first_message_creates_contact(db_session):
    bot = await _bot(db_session)

    contact_id = await ContactResolver(db_session).resolve(bot.id, "5511911112222", "Maria", T0)

    contacts = await _contacts(db_session)
    assert len(contacts) == 1
    assert contacts[0].id == contact_id
    assert contacts[0].name == "Maria"
    assert _same_instant(contacts[0].last_interaction_at, T0)


async def test_second_message_updates_without_duplicating(db_session):
    bot = await _bot(db_session)
    resolver = ContactResolver(db_session)

    first_id = await resolver.resolve(bot.id, "5511911112222", "Maria", T0)
    later = T0 + timedelta(minutes=5)
    second_id = await resolver.resolve(bot.id, "5511911112222", "Maria Silva", later)

    assert first_id == second_id
    count = await db_session.scalar(select(func.count()).select_from(WhatsappContact))
    assert count == 1
    contact = (await _contacts(db_session))[0]
    await db_session.refresh(contact)
    assert contact.name == "Maria Silva"
    assert _same_instant(contact.last_interaction_at, later)


async def test_empty_name_keeps_existing_name(db_session):
    bot = await _bot(db_session)
    resolver = ContactResolver(db_session)

    await resolver.resolve(bot.id, "5511911112222", "Maria", T0)
    await resolver.resolve(bot.id, "5511911112222", "", T0 + timedelta(hours=1))
    await resolver.resolve(bot.id, "5511911112222", None, T0 + timedelta(hours=2))

    contact = (await _contacts(db_session))[0]
    await db_session.refresh(contact)
    assert contact.name == "Maria"
    assert _same_instant(contact.last_interaction_at, T0 + timedelta(hours=2))


async def test_same_phone_on_different_bots_are_separate_contacts(db_session):
    bot_a = await _bot(db_session, "A")
    bot_b = await _bot(db_session, "B")
    resolver = ContactResolver(db_session)

    id_a = await resolver.resolve(bot_a.id, "5511911112222", "Maria", T0)
    id_b = await resolver.resolve(bot_b.id, "5511911112222", "Maria", T0)

    assert id_a != id_b
    assert len(await _contacts(db_session)) == 2


async def test_insert_conflict_reuses_existing_contact(db_session, monkeypatch):
    bot = await _bot(db_session)
    existing = WhatsappContact(bot_id=bot.id, phone="5511911112222", name="Maria")
    db_session.add(existing)
    await db_session.commit()

    resolver = ContactResolver(db_session)
    real_get_by_phone = resolver.contact_repo.get_by_phone
    lookups = []

    async def stale_first_lookup(bot_id, phone):
        lookups.append(phone)
        if len(lookups) == 1:
            return None
        return await real_get_by_phone(bot_id, phone)

    monkeypatch.setattr(resolver.contact_repo, "get_by_phone", stale_first_lookup)

    contact_id = await resolver.resolve(bot.id, "5511911112222", "Maria Silva", T0)

    assert contact_id == existing.id
    assert len(await _contacts(db_session)) == 1
    # Objects loaded earlier in the session stay usable
    assert bot.instance_id == "INSTANCE-1"
    assert existing.name == "Maria Silva"
