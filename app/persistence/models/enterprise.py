"""Enterprise and Profile models."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import relationship

from app.persistence.database import Base
from app.persistence.types import utc_now


class Enterprise(Base):
    """Enterprise model - the tenant that owns profiles and projects."""

    __tablename__ = "enterprises"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    cep = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    number = Column(Text, nullable=False)
    complement = Column(Text, nullable=True)
    city = Column(Text, nullable=False)
    state = Column(Text, nullable=False)
    instagram_url = Column(Text, nullable=True)
    phone_number = Column(Text, nullable=False)
    register = Column(Text, nullable=False)  # CNPJ/CPF
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    profiles = relationship("Profile", back_populates="enterprise")
    projects = relationship("Project", back_populates="enterprise")

    def __repr__(self) -> str:
        return f"<Enterprise(id={self.id}, name={self.name})>"


class Profile(Base):
    """Profile of an authenticated user. The id is the auth provider's user id."""

    __tablename__ = "profiles"

    id = Column(Uuid, primary_key=True)
    email = Column(Text, nullable=False)
    name = Column(Text, nullable=False)
    phone = Column(String(256), nullable=False)
    role = Column(Text, nullable=False, default="user")
    status = Column(Text, nullable=False, default="active")  # active, inactive
    profile_picture = Column(Text, nullable=True)
    enterprise_id = Column(Uuid, ForeignKey("enterprises.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False)

    # Relationships
    enterprise = relationship("Enterprise", back_populates="profiles")

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, email={self.email}, enterprise_id={self.enterprise_id})>"
