"""WhatsApp contact model."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Text, UniqueConstraint, Uuid

from app.persistence.database import Base
from app.persistence.types import utc_now


class WhatsappContact(Base):
    """A conversation party, unique per (bot, phone)."""

    __tablename__ = "whatsapp_contacts"
    __table_args__ = (
        UniqueConstraint("bot_id", "phone", name="uq_whatsapp_contacts_bot_phone"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    bot_id = Column(Uuid, ForeignKey("whatsapp_bots.id", ondelete="CASCADE"), nullable=False, index=True)
    phone = Column(Text, nullable=False)
    name = Column(Text, nullable=True)
    last_interaction_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    def __repr__(self) -> str:
        return f"<WhatsappContact(id={self.id}, bot_id={self.bot_id}, phone={self.phone})>"
