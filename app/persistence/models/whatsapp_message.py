"""WhatsApp message log model."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Text, Uuid

from app.persistence.database import Base
from app.persistence.types import utc_now


class MessageDirection:
    """Message direction constants."""
    INCOMING = "incoming"
    OUTGOING = "outgoing"


class WhatsappMessage(Base):
    """Append-only log entry of one inbound or outbound message."""

    __tablename__ = "whatsapp_messages"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    bot_id = Column(Uuid, ForeignKey("whatsapp_bots.id", ondelete="CASCADE"), nullable=False, index=True)
    contact_id = Column(
        Uuid, ForeignKey("whatsapp_contacts.id", ondelete="SET NULL"), nullable=True, index=True
    )
    phone = Column(Text, nullable=False)
    message_id = Column(Text, nullable=True, index=True)  # Z-API message id
    direction = Column(Text, nullable=False)
    message_text = Column(Text, nullable=False)
    message_type = Column(Text, nullable=False, default="text")  # text, menu, flow
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<WhatsappMessage(id={self.id}, bot_id={self.bot_id}, direction={self.direction}, type={self.message_type})>"
