"""WhatsApp response template model."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Text, Uuid

from app.persistence.database import Base
from app.persistence.types import utc_now


class ResponseType:
    """Response type constants. FLOW is stored but not yet deliverable."""
    TEXT = "text"
    MENU = "menu"
    FLOW = "flow"

    ALL = (TEXT, MENU, FLOW)


class WhatsappResponse(Base):
    """Reusable reply template: plain text or a menu."""

    __tablename__ = "whatsapp_responses"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    bot_id = Column(Uuid, ForeignKey("whatsapp_bots.id", ondelete="CASCADE"), nullable=False, index=True)
    response_text = Column(Text, nullable=True)
    response_type = Column(Text, nullable=False, default=ResponseType.TEXT)
    # menus and responses reference each other through menu options
    menu_id = Column(
        Uuid,
        ForeignKey(
            "whatsapp_menus.id",
            ondelete="SET NULL",
            use_alter=True,
            name="fk_whatsapp_responses_menu_id",
        ),
        nullable=True,
    )
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    def __repr__(self) -> str:
        return f"<WhatsappResponse(id={self.id}, bot_id={self.bot_id}, type={self.response_type})>"
