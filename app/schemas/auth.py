"""Authentication schemas"""

from typing import Optional
from uuid import UUID
from pydantic import BaseModel, EmailStr, Field

from app.models.user import UserRole
from app.models.restaurant import Plan
from app.schemas.restaurant import RestaurantResponse


class RegisterRequest(BaseModel):
    """Owner sign-up; also creates the owner's restaurant"""
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=6)
    plan: Plan = Plan.BASIC
    address: Optional[str] = None
    phone: Optional[str] = None
    opening_hours: Optional[str] = Field(None, alias="openingHours")
    closing_hours: Optional[str] = Field(None, alias="closingHours")
    description: Optional[str] = None
    region: Optional[str] = None
    logo_url: Optional[str] = Field(None, alias="logoUrl")

    class Config:
        populate_by_name = True


class LoginRequest(BaseModel):
    """Login request"""
    email: EmailStr
    password: str


class ChangePasswordRequest(BaseModel):
    old_password: str = Field(..., alias="oldPassword")
    new_password: str = Field(..., alias="newPassword", min_length=6)

    class Config:
        populate_by_name = True


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class CaptchaRequest(BaseModel):
    token: str = Field(..., min_length=1)


class ResetPasswordRequest(BaseModel):
    token: str
    new_password: str = Field(..., alias="newPassword", min_length=6)

    class Config:
        populate_by_name = True


class SessionUser(BaseModel):
    """User as exposed to the dashboard"""
    id: UUID
    name: str
    email: str
    role: UserRole
    restaurant_id: Optional[UUID] = None
    restaurant_name: Optional[str] = None


class RegisterResponse(BaseModel):
    user: SessionUser
    restaurant: RestaurantResponse


class LoginResponse(BaseModel):
    user: SessionUser


class MessageResponse(BaseModel):
    message: str
