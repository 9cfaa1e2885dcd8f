"""Project model."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import relationship

from app.persistence.database import Base
from app.persistence.types import utc_now


class Project(Base):
    """Project owned by an enterprise. May have one WhatsApp bot."""

    __tablename__ = "projects"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    logo_url = Column(Text, nullable=True)
    status = Column(Text, nullable=False, default="active")  # active, inactive
    category = Column(Text, nullable=False)  # microsaas, ecommerce, crm, others
    slug = Column(Text, nullable=False)
    enterprise_id = Column(Uuid, ForeignKey("enterprises.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    enterprise = relationship("Enterprise", back_populates="projects")
    bot = relationship("WhatsappBot", back_populates="project", uselist=False, passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, name={self.name}, enterprise_id={self.enterprise_id})>"
