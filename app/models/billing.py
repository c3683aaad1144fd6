"""Payment and subscription models"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Integer, Text, Uuid

from app.database import Base


class Payment(Base):
    """Subscription payments made by restaurant owners"""
    __tablename__ = "payments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    restaurant_id = Column(Uuid, ForeignKey("restaurants.id"))
    amount_cents = Column(Integer, nullable=False)
    status = Column(String(50), default="Success")
    provider = Column(String(50))  # stripe, paypal, ...
    transaction_id = Column(String(255))
    created_at = Column(DateTime, default=datetime.utcnow)


class Subscription(Base):
    """Available subscription plans"""
    __tablename__ = "subscriptions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    plan_name = Column(String(50), unique=True, nullable=False)
    price_cents = Column(Integer, nullable=False, default=0)
    billing_cycle = Column(String(20), default="monthly")
    description = Column(Text)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class PlanFeature(Base):
    """Features unlocked by a plan"""
    __tablename__ = "plan_features"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    plan_name = Column(String(50), nullable=False, index=True)
    feature = Column(String(255), nullable=False)
    is_enabled = Column(Boolean, default=True)
