"""Database models"""

from app.models.user import User, UserRole
from app.models.restaurant import Restaurant, Plan
from app.models.menu import MenuItem, Popularity
from app.models.order import Order, OrderItem, OrderStatus, OrderStatusValue, OrderPriority
from app.models.billing import Payment, Subscription, PlanFeature
from app.models.support import SupportTicket, Feedback, WebhookEvent
from app.models.audit import ActivityLog
from app.models.session import UserSession

__all__ = [
    "User",
    "UserRole",
    "Restaurant",
    "Plan",
    "MenuItem",
    "Popularity",
    "Order",
    "OrderItem",
    "OrderStatus",
    "OrderStatusValue",
    "OrderPriority",
    "Payment",
    "Subscription",
    "PlanFeature",
    "SupportTicket",
    "Feedback",
    "WebhookEvent",
    "ActivityLog",
    "UserSession",
]
