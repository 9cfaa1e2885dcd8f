"""Data models for Z-API webhook callbacks."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

RECEIVED_CALLBACK = "ReceivedCallback"


class ZApiText(BaseModel):
    """Text content of a received message."""

    model_config = ConfigDict(extra="ignore")

    message: str | None = None


class ZApiWebhookMessage(BaseModel):
    """One message event from a Z-API ``on-message-received`` callback.

    Only the fields the pipeline reads are declared; everything else the
    gateway sends (photos, lids, trace context...) is ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    instance_id: str = Field(alias="instanceId")
    message_id: str | None = Field(default=None, alias="messageId")
    phone: str = ""
    from_me: bool = Field(default=False, alias="fromMe")
    is_group: bool = Field(default=False, alias="isGroup")
    type: str = ""
    momment: int | None = None  # epoch milliseconds, spelled as Z-API sends it
    sender_name: str | None = Field(default=None, alias="senderName")
    chat_name: str | None = Field(default=None, alias="chatName")
    text: ZApiText | None = None

    @property
    def message_text(self) -> str:
        if self.text is None or not self.text.message:
            return ""
        return self.text.message

    @property
    def candidate_name(self) -> str | None:
        return self.sender_name or self.chat_name or None

    @property
    def event_time(self) -> datetime:
        """Event timestamp; falls back to now when the gateway omits it."""
        if self.momment is None:
            return datetime.now(timezone.utc)
        return datetime.fromtimestamp(self.momment / 1000, tz=timezone.utc)

    def is_processable(self) -> bool:
        """Received, non-echo, direct text message."""
        return (
            not self.from_me
            and not self.is_group
            and self.type == RECEIVED_CALLBACK
            and bool(self.message_text)
        )
