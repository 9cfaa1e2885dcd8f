"""WhatsApp trigger model."""

import uuid

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Text, Uuid

from app.persistence.database import Base
from app.persistence.types import utc_now


class MatchType:
    """Trigger match type constants."""
    EXACT = "exact"
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"
    REGEX = "regex"

    ALL = (EXACT, CONTAINS, STARTS_WITH, REGEX)


class WhatsappTrigger(Base):
    """Rule that maps inbound text to a response. Lower priority is evaluated first."""

    __tablename__ = "whatsapp_triggers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    bot_id = Column(Uuid, ForeignKey("whatsapp_bots.id", ondelete="CASCADE"), nullable=False, index=True)
    trigger_text = Column(Text, nullable=False)
    match_type = Column(Text, nullable=False, default=MatchType.EXACT)
    priority = Column(Integer, nullable=False, default=0)
    response_id = Column(
        Uuid, ForeignKey("whatsapp_responses.id", ondelete="CASCADE"), nullable=False
    )
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<WhatsappTrigger(id={self.id}, bot_id={self.bot_id}, match_type={self.match_type}, "
            f"priority={self.priority})>"
        )
