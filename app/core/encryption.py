"""Field-level encryption for credentials stored at rest.

Bot API tokens are stored encrypted with Fernet when FIELD_ENCRYPTION_KEY is
configured. Encrypted values carry an 'enc:' prefix so rows written before a
key was configured keep reading back as plaintext.
"""

import logging
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken

logger = logging.getLogger(__name__)

ENCRYPTED_PREFIX = "enc:"


class EncryptionError(Exception):
    """Raised when encryption/decryption fails."""


class EncryptionService:
    """Encrypts and decrypts short secrets with a single Fernet key."""

    def __init__(self, key: str | None) -> None:
        self._fernet: Fernet | None = None
        if not key:
            logger.warning("No encryption key configured - credentials stored as plaintext")
            return
        try:
            self._fernet = Fernet(key.encode())
        except (ValueError, TypeError) as e:
            logger.error(f"Invalid FIELD_ENCRYPTION_KEY format: {e}")

    @property
    def is_enabled(self) -> bool:
        return self._fernet is not None

    def encrypt(self, plaintext: str) -> str:
        """Encrypt a plaintext string.

        Returns the value unchanged when encryption is disabled.
        """
        if not plaintext or self._fernet is None or plaintext.startswith(ENCRYPTED_PREFIX):
            return plaintext
        return ENCRYPTED_PREFIX + self._fernet.encrypt(plaintext.encode()).decode()

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a value written by encrypt().

        Raises:
            EncryptionError: If the value is encrypted but cannot be decrypted
        """
        if not ciphertext or not ciphertext.startswith(ENCRYPTED_PREFIX):
            return ciphertext
        if self._fernet is None:
            raise EncryptionError("Cannot decrypt: encryption key not configured")
        try:
            return self._fernet.decrypt(ciphertext[len(ENCRYPTED_PREFIX):].encode()).decode()
        except InvalidToken as e:
            raise EncryptionError("Failed to decrypt: invalid token or wrong key") from e


_encryption_service: Optional[EncryptionService] = None


def get_encryption_service() -> EncryptionService:
    """Get the process-wide encryption service built from settings."""
    global _encryption_service
    if _encryption_service is None:
        from app.settings import settings

        _encryption_service = EncryptionService(settings.field_encryption_key)
    return _encryption_service


def encrypt_field(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return get_encryption_service().encrypt(value)


def decrypt_field(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return get_encryption_service().decrypt(value)
