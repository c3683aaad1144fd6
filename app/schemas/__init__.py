"""Pydantic schemas for request/response validation"""

from app.schemas.auth import (
    RegisterRequest,
    RegisterResponse,
    LoginRequest,
    LoginResponse,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    CaptchaRequest,
    ResetPasswordRequest,
    SessionUser,
    MessageResponse,
)
from app.schemas.restaurant import (
    RestaurantResponse,
    RestaurantEnvelope,
    RestaurantListResponse,
    RestaurantSettingsUpdate,
    PlanUpdate,
    QRCodeResponse,
    ProfileResponse,
    ProfileUpdate,
)
from app.schemas.menu import (
    MenuItemResponse,
    MenuEnvelope,
    MenuListResponse,
    MenuDeleteResponse,
    AvailabilityUpdate,
)
from app.schemas.order import (
    OrderCreate,
    OrderUpdate,
    OrderStatusUpdate,
    OrderAssign,
    OrderResponse,
    OrderEnvelope,
    OrderListResponse,
)
from app.schemas.billing import (
    PaymentCreate,
    PaymentResponse,
    SubscriptionResponse,
    PlanFeatureResponse,
)
from app.schemas.support import (
    TicketCreate,
    TicketUpdate,
    TicketResponse,
    LogCreate,
    LogResponse,
    FeedbackCreate,
    FeedbackResponse,
    WebhookCreate,
)
from app.schemas.analytics import AnalyticsResponse

__all__ = [
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
    "ChangePasswordRequest",
    "ForgotPasswordRequest",
    "CaptchaRequest",
    "ResetPasswordRequest",
    "SessionUser",
    "MessageResponse",
    "RestaurantResponse",
    "RestaurantEnvelope",
    "RestaurantListResponse",
    "RestaurantSettingsUpdate",
    "PlanUpdate",
    "QRCodeResponse",
    "ProfileResponse",
    "ProfileUpdate",
    "MenuItemResponse",
    "MenuEnvelope",
    "MenuListResponse",
    "MenuDeleteResponse",
    "AvailabilityUpdate",
    "OrderCreate",
    "OrderUpdate",
    "OrderStatusUpdate",
    "OrderAssign",
    "OrderResponse",
    "OrderEnvelope",
    "OrderListResponse",
    "PaymentCreate",
    "PaymentResponse",
    "SubscriptionResponse",
    "PlanFeatureResponse",
    "TicketCreate",
    "TicketUpdate",
    "TicketResponse",
    "LogCreate",
    "LogResponse",
    "FeedbackCreate",
    "FeedbackResponse",
    "WebhookCreate",
    "AnalyticsResponse",
]
