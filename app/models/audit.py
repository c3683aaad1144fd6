"""Activity log model"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, JSON, Uuid

from app.database import Base


class ActivityLog(Base):
    """Actions recorded by dashboard users"""
    __tablename__ = "logs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"))

    level = Column(String(20), default="info")  # info, warning, error
    action = Column(String(100), nullable=False)  # menu_created, order_exported, etc.
    details = Column(JSON)

    created_at = Column(DateTime, default=datetime.utcnow)
