"""Order schemas"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from uuid import UUID
from pydantic import BaseModel, Field, computed_field

from app.models.order import OrderStatusValue, OrderPriority
from app.services.pricing import from_cents

MAX_QUANTITY = 1000
MAX_TABLE_NUMBER = 10000


class OrderItemCreate(BaseModel):
    """Line item sent by the customer menu; prices come from the menu"""
    menu_id: UUID
    quantity: int = Field(1, ge=1, le=MAX_QUANTITY)
    name: Optional[str] = None


class CustomerDetails(BaseModel):
    name: Optional[str] = None
    contact: Optional[str] = None


class OrderCreate(BaseModel):
    """Place order request"""
    restaurant_id: UUID
    table_number: int = Field(..., ge=1, le=MAX_TABLE_NUMBER)
    items: List[OrderItemCreate]
    customer_details: Optional[CustomerDetails] = None
    special_requests: Optional[str] = None


class OrderItemUpdate(BaseModel):
    menu_id: UUID
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY)


class OrderUpdate(BaseModel):
    """Update table, requests or item quantities"""
    table_number: Optional[int] = Field(None, ge=1, le=MAX_TABLE_NUMBER)
    special_requests: Optional[str] = None
    items: Optional[List[OrderItemUpdate]] = None


class OrderStatusUpdate(BaseModel):
    status: OrderStatusValue
    priority: Optional[OrderPriority] = None


class OrderAssign(BaseModel):
    kitchen_section: Optional[str] = None
    staff_member: Optional[str] = None


class OrderItemResponse(BaseModel):
    """Order item in response"""
    id: UUID
    menu_id: Optional[UUID]
    name: str
    quantity: int
    price_cents: int
    special_requests: Optional[str]

    @computed_field
    @property
    def price(self) -> Decimal:
        return from_cents(self.price_cents)

    class Config:
        from_attributes = True


class OrderStatusResponse(BaseModel):
    order_id: UUID
    status: str
    priority: str
    time_elapsed: Optional[int]
    updated_at: Optional[datetime]

    class Config:
        from_attributes = True


class OrderResponse(BaseModel):
    """Order response"""
    id: UUID
    restaurant_id: UUID
    table_number: int
    customer_name: Optional[str]
    customer_contact: Optional[str]
    special_requests: Optional[str]
    kitchen_section: Optional[str]
    staff_member: Optional[str]
    total_cents: int
    status: Optional[str]
    priority: Optional[str]
    items: List[OrderItemResponse]
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def total(self) -> Decimal:
        return from_cents(self.total_cents)


class OrderEnvelope(BaseModel):
    message: Optional[str] = None
    order: OrderResponse


class OrderListResponse(BaseModel):
    """Paginated order list"""
    items: List[OrderResponse]
    total: int
    page: int
    page_size: int


class OrderHistoryResponse(BaseModel):
    orders: List[OrderResponse]


class StatusEnvelope(BaseModel):
    message: str
    status: OrderStatusResponse
