"""Tests for credential encryption."""

import pytest
from cryptography.fernet import Fernet
from sqlalchemy import text

from app.core.encryption import ENCRYPTED_PREFIX, EncryptionError, EncryptionService
from tests.factories import create_bot, create_enterprise, create_project


def test_encrypt_decrypt():
    service = EncryptionService(Fernet.generate_key().decode())

    encrypted = service.encrypt("secret-token")

    assert encrypted.startswith(ENCRYPTED_PREFIX)
    assert "secret-token" not in encrypted
    assert service.decrypt(encrypted) == "secret-token"


def test_disabled_service_passes_plaintext_through():
    service = EncryptionService(None)
    assert not service.is_enabled
    assert service.encrypt("secret-token") == "secret-token"
    assert service.decrypt("secret-token") == "secret-token"


def test_encrypting_twice_is_a_noop():
    service = EncryptionService(Fernet.generate_key().decode())
    once = service.encrypt("secret-token")
    assert service.encrypt(once) == once


def test_wrong_key_raises():
    encrypted = EncryptionService(Fernet.generate_key().decode()).encrypt("secret-token")
    with pytest.raises(EncryptionError):
        EncryptionService(Fernet.generate_key().decode()).decrypt(encrypted)


def test_encrypted_value_without_key_raises():
    encrypted = EncryptionService(Fernet.generate_key().decode()).encrypt("secret-token")
    with pytest.raises(EncryptionError):
        EncryptionService(None).decrypt(encrypted)


async def test_bot_token_encrypted_at_rest(db_session, monkeypatch):
    service = EncryptionService(Fernet.generate_key().decode())
    monkeypatch.setattr("app.core.encryption._encryption_service", service)

    enterprise = await create_enterprise(db_session)
    project = await create_project(db_session, enterprise)
    bot = await create_bot(db_session, project)

    raw = await db_session.scalar(
        text("SELECT api_token FROM whatsapp_bots WHERE id = :id"), {"id": bot.id.hex}
    )
    assert raw.startswith(ENCRYPTED_PREFIX)

    db_session.expire(bot)
    await db_session.refresh(bot)
    assert bot.api_token == "token-abcdef"
