"""Restaurant API endpoints"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.models.restaurant import Restaurant
from app.models.session import UserSession
from app.models.user import UserRole
from app.schemas.restaurant import (
    PlanUpdate,
    QRCodeResponse,
    RestaurantEnvelope,
    RestaurantListResponse,
    RestaurantResponse,
    RestaurantSettingsUpdate,
)
from app.services.qr import public_menu_url, qr_data_url
from app.api.auth import get_current_session, require_role

router = APIRouter()
logger = structlog.get_logger()


async def get_restaurant_or_404(db: AsyncSession, restaurant_id: UUID) -> Restaurant:
    restaurant = await db.get(Restaurant, restaurant_id)
    if not restaurant:
        raise HTTPException(status_code=404, detail="Restaurant not found")
    return restaurant


@router.get("", response_model=RestaurantListResponse)
async def list_restaurants(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    session: UserSession = Depends(require_role(UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    """List all restaurants (admin only)"""
    total = (await db.execute(select(func.count(Restaurant.id)))).scalar()
    result = await db.execute(
        select(Restaurant)
        .order_by(Restaurant.created_at.desc())
        .offset(skip)
        .limit(limit)
    )
    return RestaurantListResponse(
        restaurants=[RestaurantResponse.model_validate(r) for r in result.scalars().all()],
        total=total,
    )


@router.get("/{restaurant_id}", response_model=RestaurantEnvelope)
async def get_restaurant(
    restaurant_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Public restaurant details, used by the customer menu"""
    restaurant = await get_restaurant_or_404(db, restaurant_id)
    return RestaurantEnvelope(restaurant=RestaurantResponse.model_validate(restaurant))


@router.put("/{restaurant_id}/settings", response_model=RestaurantEnvelope)
async def update_restaurant_settings(
    restaurant_id: UUID,
    settings_data: RestaurantSettingsUpdate,
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Update restaurant settings (owner of the restaurant only)"""
    if session.role != UserRole.OWNER.value or session.restaurant_id != restaurant_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not authorized")

    restaurant = await get_restaurant_or_404(db, restaurant_id)

    for field, value in settings_data.model_dump(exclude_unset=True).items():
        # name is NOT NULL; a null name leaves it unchanged
        if field == "name" and value is None:
            continue
        setattr(restaurant, field, value)

    await db.commit()
    await db.refresh(restaurant)

    logger.info("Restaurant settings updated", restaurant_id=str(restaurant_id))
    return RestaurantEnvelope(restaurant=RestaurantResponse.model_validate(restaurant))


@router.patch("/{restaurant_id}/plan", response_model=RestaurantEnvelope)
async def update_restaurant_plan(
    restaurant_id: UUID,
    plan_data: PlanUpdate,
    session: UserSession = Depends(require_role(UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    """Change a restaurant's subscription plan (admin only)"""
    restaurant = await get_restaurant_or_404(db, restaurant_id)
    restaurant.plan = plan_data.plan.value

    await db.commit()
    await db.refresh(restaurant)

    logger.info("Restaurant plan changed", restaurant_id=str(restaurant_id), plan=restaurant.plan)
    return RestaurantEnvelope(restaurant=RestaurantResponse.model_validate(restaurant))


@router.get("/{restaurant_id}/qrcode", response_model=QRCodeResponse)
async def get_qrcode(
    restaurant_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """QR code for the table cards, linking to the public menu"""
    await get_restaurant_or_404(db, restaurant_id)

    url = public_menu_url(restaurant_id)
    return QRCodeResponse(qr_image=qr_data_url(url), url=url)
