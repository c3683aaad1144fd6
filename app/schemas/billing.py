"""Payment and subscription schemas"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from uuid import UUID
from pydantic import BaseModel, Field, computed_field

from app.services.pricing import MAX_CENTS, from_cents


class PaymentCreate(BaseModel):
    restaurant_id: Optional[UUID] = None
    amount: Decimal = Field(..., gt=0, le=from_cents(MAX_CENTS))
    provider: str
    transaction_id: Optional[str] = None


class PaymentResponse(BaseModel):
    id: UUID
    user_id: UUID
    restaurant_id: Optional[UUID]
    amount_cents: int
    status: str
    provider: Optional[str]
    transaction_id: Optional[str]
    created_at: datetime

    @computed_field
    @property
    def amount(self) -> Decimal:
        return from_cents(self.amount_cents)

    class Config:
        from_attributes = True


class PaymentEnvelope(BaseModel):
    payment: PaymentResponse


class PaymentListResponse(BaseModel):
    payments: List[PaymentResponse]


class SubscriptionResponse(BaseModel):
    id: UUID
    plan_name: str
    price_cents: int
    billing_cycle: Optional[str]
    description: Optional[str]
    is_active: bool

    @computed_field
    @property
    def price(self) -> Decimal:
        return from_cents(self.price_cents)

    class Config:
        from_attributes = True


class SubscriptionListResponse(BaseModel):
    subscriptions: List[SubscriptionResponse]


class PlanFeatureResponse(BaseModel):
    id: UUID
    plan_name: str
    feature: str
    is_enabled: bool

    class Config:
        from_attributes = True


class PlanFeatureListResponse(BaseModel):
    features: List[PlanFeatureResponse]
