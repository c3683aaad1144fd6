"""Support tickets, customer feedback and inbound webhook events"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, Integer, JSON, Text, Uuid

from app.database import Base


class SupportTicket(Base):
    """Owner support requests"""
    __tablename__ = "support_tickets"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    restaurant_id = Column(Uuid, ForeignKey("restaurants.id"))
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), default="Open")  # Open, Closed
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Feedback(Base):
    """Customer feedback on an order"""
    __tablename__ = "feedback"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid, ForeignKey("orders.id"), nullable=False)
    restaurant_id = Column(Uuid, ForeignKey("restaurants.id"), nullable=False)
    rating = Column(Integer, nullable=False)  # 1-5
    comment = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)


class WebhookEvent(Base):
    """Raw events received from external providers"""
    __tablename__ = "webhooks"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    provider = Column(String(50), nullable=False)
    event_type = Column(String(100), nullable=False)
    payload = Column(JSON)
    received_at = Column(DateTime, default=datetime.utcnow)
