"""WhatsApp menu and menu option models."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text, Uuid
from sqlalchemy.orm import relationship

from app.persistence.database import Base
from app.persistence.types import utc_now


class WhatsappMenu(Base):
    """Named collection of ordered options, delivered as a numbered list."""

    __tablename__ = "whatsapp_menus"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    bot_id = Column(Uuid, ForeignKey("whatsapp_bots.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    options = relationship(
        "WhatsappMenuOption",
        back_populates="menu",
        cascade="all, delete-orphan",
        order_by="WhatsappMenuOption.order",
    )

    def __repr__(self) -> str:
        return f"<WhatsappMenu(id={self.id}, bot_id={self.bot_id}, title={self.title})>"


class WhatsappMenuOption(Base):
    """One selectable option of a menu."""

    __tablename__ = "whatsapp_menu_options"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    menu_id = Column(Uuid, ForeignKey("whatsapp_menus.id", ondelete="CASCADE"), nullable=False, index=True)
    option_text = Column(Text, nullable=False)
    option_value = Column(Text, nullable=True)
    response_id = Column(Uuid, ForeignKey("whatsapp_responses.id", ondelete="SET NULL"), nullable=True)
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    menu = relationship("WhatsappMenu", back_populates="options")

    def __repr__(self) -> str:
        return f"<WhatsappMenuOption(id={self.id}, menu_id={self.menu_id}, order={self.order})>"
