"""Z-API WhatsApp gateway client."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable

import httpx

from app.persistence.models.whatsapp_bot import WhatsappBot
from app.settings import settings

logger = logging.getLogger(__name__)


@dataclass
class SendResult:
    """Result of an outbound send."""

    message_id: str | None
    raw_response: dict | None = None


class MessageSender(ABC):
    """Outbound text channel for one bot."""

    @abstractmethod
    async def send_text(self, phone: str, message: str) -> SendResult:
        """Send a text message.

        Args:
            phone: Recipient phone as delivered by the gateway
            message: Message text

        Returns:
            SendResult with the gateway's message ID

        Raises:
            httpx.HTTPError: On transport failure or non-2xx response
        """
        pass


class ZApiClient(MessageSender):
    """Z-API client bound to a single instance."""

    def __init__(
        self,
        instance_id: str,
        api_token: str,
        client_token: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Z-API client.

        Args:
            instance_id: Z-API instance ID
            api_token: Instance token, part of the request path
            client_token: Account security token sent as ``Client-Token``
            base_url: API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.instance_id = instance_id
        self.api_token = api_token
        self.client_token = client_token
        self.base_url = (base_url or settings.zapi_base_url).rstrip("/")
        self.timeout = timeout or settings.zapi_timeout_seconds
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        """Create HTTP client scoped to the instance."""
        headers = {"Content-Type": "application/json"}
        if self.client_token:
            headers["Client-Token"] = self.client_token
        return httpx.AsyncClient(
            base_url=f"{self.base_url}/instances/{self.instance_id}/token/{self.api_token}",
            headers=headers,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def send_text(self, phone: str, message: str) -> SendResult:
        """Send a text message via the Z-API send-text endpoint."""
        payload: dict[str, Any] = {"phone": phone, "message": message}

        async with self._get_client() as client:
            response = await client.post("/send-text", json=payload)
            response.raise_for_status()
            data = response.json()

        # Z-API returns messageId; some versions only return id
        message_id = data.get("messageId") or data.get("id")
        logger.debug(f"Z-API send-text to {phone} accepted, message_id={message_id}")
        return SendResult(message_id=message_id, raw_response=data)


SenderFactory = Callable[[WhatsappBot], MessageSender]


def zapi_client_for_bot(bot: WhatsappBot) -> ZApiClient:
    """Build a Z-API client from a bot's stored credentials."""
    return ZApiClient(
        instance_id=bot.instance_id,
        api_token=bot.api_token,
        client_token=settings.zapi_client_token,
    )


def get_sender_factory() -> SenderFactory:
    """Dependency returning the factory that builds a sender per bot."""
    return zapi_client_for_bot
