"""WhatsApp bot model."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import relationship

from app.persistence.database import Base
from app.persistence.types import EncryptedText, utc_now


class BotStatus:
    """Bot status constants."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class WhatsappBot(Base):
    """A Z-API instance bound 1:1 to a project."""

    __tablename__ = "whatsapp_bots"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    project_id = Column(
        Uuid, ForeignKey("projects.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    instance_id = Column(Text, nullable=False, index=True)  # Z-API instance id, tenant key on the webhook path
    api_token = Column(EncryptedText, nullable=False)
    webhook_url = Column(Text, nullable=True)
    status = Column(Text, nullable=False, default=BotStatus.INACTIVE)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    project = relationship("Project", back_populates="bot")

    @property
    def is_active(self) -> bool:
        return self.status == BotStatus.ACTIVE

    def __repr__(self) -> str:
        return f"<WhatsappBot(id={self.id}, project_id={self.project_id}, instance_id={self.instance_id}, status={self.status})>"
