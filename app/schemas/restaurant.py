"""Restaurant and profile schemas"""

from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import BaseModel, EmailStr, Field

from app.models.restaurant import Plan
from app.models.user import UserRole


class RestaurantResponse(BaseModel):
    """Restaurant response"""
    id: UUID
    owner_id: UUID
    name: str
    plan: str
    address: Optional[str]
    phone: Optional[str]
    opening_hours: Optional[str]
    closing_hours: Optional[str]
    description: Optional[str]
    region: Optional[str]
    logo_url: Optional[str]
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


class RestaurantEnvelope(BaseModel):
    restaurant: RestaurantResponse


class RestaurantListResponse(BaseModel):
    restaurants: List[RestaurantResponse]
    total: int


class RestaurantSettingsUpdate(BaseModel):
    """Update restaurant settings"""
    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    opening_hours: Optional[str] = None
    closing_hours: Optional[str] = None
    address: Optional[str] = None
    description: Optional[str] = None
    region: Optional[str] = None


class PlanUpdate(BaseModel):
    plan: Plan


class QRCodeResponse(BaseModel):
    """Data URL of a PNG QR code pointing at the public menu"""
    qr_image: str = Field(..., alias="qrImage")
    url: str

    class Config:
        populate_by_name = True


class ProfileUser(BaseModel):
    id: UUID
    name: str
    email: str
    role: UserRole
    restaurant: Optional[RestaurantResponse] = None


class ProfileResponse(BaseModel):
    user: ProfileUser


class ProfileUpdate(BaseModel):
    """Profile update; restaurant fields apply to owners only"""
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    restaurant_name: Optional[str] = Field(None, alias="restaurantName")
    logo_url: Optional[str] = Field(None, alias="logoUrl")
    address: Optional[str] = None
    opening_hours: Optional[str] = Field(None, alias="openingHours")
    closing_hours: Optional[str] = Field(None, alias="closingHours")
    description: Optional[str] = None

    class Config:
        populate_by_name = True
