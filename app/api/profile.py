"""Profile API endpoints"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.models.restaurant import Restaurant
from app.models.session import UserSession
from app.models.user import User, UserRole
from app.schemas.restaurant import ProfileResponse, ProfileUpdate, ProfileUser, RestaurantResponse
from app.api.auth import get_current_session, get_owner_restaurant

router = APIRouter()
logger = structlog.get_logger()

# ProfileUpdate field -> Restaurant column
RESTAURANT_FIELDS = {
    "restaurant_name": "name",
    "phone": "phone",
    "logo_url": "logo_url",
    "address": "address",
    "opening_hours": "opening_hours",
    "closing_hours": "closing_hours",
    "description": "description",
}


def _profile(user: User, restaurant) -> ProfileResponse:
    return ProfileResponse(
        user=ProfileUser(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            restaurant=RestaurantResponse.model_validate(restaurant) if restaurant else None,
        )
    )


@router.get("", response_model=ProfileResponse)
async def get_profile(
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """User profile along with the owned restaurant, if any"""
    user = session.user
    restaurant = await get_owner_restaurant(db, user)
    return _profile(user, restaurant)


@router.put("", response_model=ProfileResponse)
async def update_profile(
    profile_data: ProfileUpdate,
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Update user details and, for owners, restaurant details"""
    user = session.user
    changes = profile_data.model_dump(exclude_unset=True)

    if "email" in changes and changes["email"] is not None:
        email = changes["email"].lower()
        if email != user.email:
            result = await db.execute(select(User).where(User.email == email))
            if result.scalar_one_or_none():
                raise HTTPException(status_code=400, detail="Email already in use")
            user.email = email

    if changes.get("name"):
        user.name = changes["name"]
        session.name = user.name

    restaurant = None
    if user.role == UserRole.OWNER and session.restaurant_id:
        restaurant = await db.get(Restaurant, session.restaurant_id)
        if restaurant:
            for field, column in RESTAURANT_FIELDS.items():
                if field not in changes:
                    continue
                if column == "name" and not changes[field]:
                    continue
                setattr(restaurant, column, changes[field])

    await db.commit()
    if restaurant:
        await db.refresh(restaurant)

    logger.info("Profile updated", user_id=str(user.id))
    return _profile(user, restaurant)
