"""Restaurant (tenant) model"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import relationship
import enum

from app.database import Base


class Plan(str, enum.Enum):
    """Subscription tiers"""
    BASIC = "Basic"
    PRO = "Pro"
    PREMIUM = "Premium"


class Restaurant(Base):
    """A restaurant owned by a single owner account"""
    __tablename__ = "restaurants"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    owner_id = Column(Uuid, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    plan = Column(String(50), default=Plan.BASIC.value)

    # Business information
    address = Column(Text)
    phone = Column(String(50))
    opening_hours = Column(String(50))
    closing_hours = Column(String(50))
    description = Column(Text)
    region = Column(String(100))
    logo_url = Column(String(500))

    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    owner = relationship("User", back_populates="restaurants")
    menu_items = relationship("MenuItem", back_populates="restaurant")
    orders = relationship("Order", back_populates="restaurant")
