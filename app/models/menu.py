"""Menu item model"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Integer, Float, Boolean, DateTime, ForeignKey, JSON, Text, Uuid
from sqlalchemy.orm import relationship
import enum

from app.database import Base


class Popularity(str, enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class MenuItem(Base):
    """Menu items"""
    __tablename__ = "menus"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    restaurant_id = Column(Uuid, ForeignKey("restaurants.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    category = Column(String(100))
    price_cents = Column(Integer, nullable=False)  # Price in cents to avoid float issues

    image_url = Column(String(500))
    video_url = Column(String(500))

    is_available = Column(Boolean, default=True)
    dish_tags = Column(JSON, default=list)  # ["spicy", "vegan", ...]
    popularity = Column(String(20), default=Popularity.MEDIUM.value)
    rating = Column(Float)  # 0-5 stars
    availability_schedule = Column(String(255))  # "Mon-Fri, 11:00-14:00"

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    restaurant = relationship("Restaurant", back_populates="menu_items")
