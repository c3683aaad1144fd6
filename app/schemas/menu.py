"""Menu schemas"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List, Any
from uuid import UUID
from pydantic import BaseModel, computed_field, field_validator

from app.services.pricing import from_cents


class AvailabilitySchedule(BaseModel):
    """Parsed form of "Mon-Fri, 11:00-14:00" """
    days: str = ""
    timeRange: str = ""

    @classmethod
    def parse(cls, value: str) -> "AvailabilitySchedule":
        parts = [part.strip() for part in value.split(",")]
        return cls(
            days=parts[0] if parts else "",
            timeRange=parts[1] if len(parts) > 1 else "",
        )


class MenuItemResponse(BaseModel):
    """Menu item response"""
    id: UUID
    restaurant_id: UUID
    name: str
    description: Optional[str]
    category: Optional[str]
    price_cents: int
    image_url: Optional[str]
    video_url: Optional[str]
    is_available: bool
    dish_tags: List[str] = []
    popularity: Optional[str]
    rating: Optional[float]
    availability_schedule: Optional[AvailabilitySchedule] = None
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def price(self) -> Decimal:
        return from_cents(self.price_cents)

    @field_validator("availability_schedule", mode="before")
    @classmethod
    def split_schedule(cls, value: Any):
        if isinstance(value, str):
            return AvailabilitySchedule.parse(value) if value.strip() else None
        return value

    @field_validator("dish_tags", mode="before")
    @classmethod
    def default_tags(cls, value: Any):
        return value or []

    class Config:
        from_attributes = True


class MenuEnvelope(BaseModel):
    menu: MenuItemResponse


class MenuListResponse(BaseModel):
    menus: List[MenuItemResponse]
    total: int


class MenuDeleteResponse(BaseModel):
    message: str
    menu: MenuItemResponse


class AvailabilityUpdate(BaseModel):
    is_available: bool
