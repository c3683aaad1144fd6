"""Order models"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, Text, Integer, Uuid
from sqlalchemy.orm import relationship
import enum

from app.database import Base


class OrderStatusValue(str, enum.Enum):
    """Kitchen workflow status"""
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class OrderPriority(str, enum.Enum):
    NORMAL = "Normal"
    HIGH = "High"


class Order(Base):
    """Dine-in orders placed from a table's QR menu"""
    __tablename__ = "orders"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    restaurant_id = Column(Uuid, ForeignKey("restaurants.id"), nullable=False, index=True)
    table_number = Column(Integer, nullable=False)

    # Customer information
    customer_name = Column(String(255))
    customer_contact = Column(String(255))
    special_requests = Column(Text)

    # Kitchen assignment
    kitchen_section = Column(String(100))
    staff_member = Column(String(255))

    total_cents = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    restaurant = relationship("Restaurant", back_populates="orders")
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")
    status = relationship("OrderStatus", back_populates="order", uselist=False, cascade="all, delete-orphan")


class OrderItem(Base):
    """Line items of an order"""
    __tablename__ = "order_items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid, ForeignKey("orders.id"), nullable=False, index=True)
    menu_id = Column(Uuid, ForeignKey("menus.id", ondelete="SET NULL"))
    name = Column(String(255), nullable=False)  # Snapshot of the menu name
    quantity = Column(Integer, nullable=False, default=1)
    price_cents = Column(Integer, nullable=False)  # Unit price at order time
    special_requests = Column(Text)

    # Relationships
    order = relationship("Order", back_populates="items")


class OrderStatus(Base):
    """Current status and priority of an order"""
    __tablename__ = "order_status"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid, ForeignKey("orders.id"), unique=True, nullable=False)
    status = Column(String(50), default=OrderStatusValue.PENDING.value)
    priority = Column(String(20), default=OrderPriority.NORMAL.value)
    time_elapsed = Column(Integer, default=0)  # minutes
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships
    order = relationship("Order", back_populates="status")
