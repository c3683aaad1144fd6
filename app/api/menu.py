"""Menu management API endpoints"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.models.menu import MenuItem, Popularity
from app.models.restaurant import Restaurant
from app.models.session import UserSession
from app.schemas.menu import (
    AvailabilityUpdate,
    MenuDeleteResponse,
    MenuEnvelope,
    MenuItemResponse,
    MenuListResponse,
)
from app.services.menu_filters import MenuFilter, SORT_OPTIONS, filter_and_sort
from app.services.pricing import to_cents
from app.services.uploads import read_upload, store_upload
from app.api.auth import require_owner

router = APIRouter()
logger = structlog.get_logger()


def parse_price(price: Optional[str]) -> int:
    try:
        return to_cents(price)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid price")


def parse_tags(dish_tags: Optional[str]) -> list:
    if not dish_tags:
        return []
    return [tag.strip() for tag in dish_tags.split(",") if tag.strip()]


def parse_rating(rating: Optional[str]) -> Optional[float]:
    if rating is None or not rating.strip():
        return None
    try:
        value = float(rating)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid rating")
    if not 0 <= value <= 5:
        raise HTTPException(status_code=400, detail="Rating must be between 0 and 5")
    return value


def parse_popularity(popularity: Optional[str]) -> Optional[str]:
    if not popularity:
        return None
    try:
        return Popularity(popularity).value
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid popularity")


def parse_bool(value: Optional[str]) -> Optional[bool]:
    if value is None or value == "":
        return None
    return value.lower() in ("true", "1", "yes", "on")


async def get_owned_item(db: AsyncSession, menu_id: UUID, session: UserSession) -> MenuItem:
    result = await db.execute(
        select(MenuItem).where(
            MenuItem.id == menu_id,
            MenuItem.restaurant_id == session.restaurant_id,
        )
    )
    item = result.scalar_one_or_none()

    if not item:
        raise HTTPException(status_code=404, detail="Menu item not found or not authorized")

    return item


@router.post("", response_model=MenuEnvelope, status_code=201)
async def create_menu_item(
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    dish_tags: Optional[str] = Form(None, alias="dishTags"),
    popularity: Optional[str] = Form(None),
    rating: Optional[str] = Form(None),
    availability_schedule: Optional[str] = Form(None, alias="availabilitySchedule"),
    image: Optional[UploadFile] = File(None),
    video: Optional[UploadFile] = File(None),
    session: UserSession = Depends(require_owner),
    db: AsyncSession = Depends(get_db),
):
    """Create a new menu item for the owner's restaurant"""
    if not name or not description or not category or price is None or price == "":
        raise HTTPException(status_code=400, detail="Missing required fields")

    item = MenuItem(
        restaurant_id=session.restaurant_id,
        name=name,
        description=description,
        category=category,
        price_cents=parse_price(price),
        is_available=True,
        dish_tags=parse_tags(dish_tags),
        popularity=parse_popularity(popularity) or Popularity.MEDIUM.value,
        rating=parse_rating(rating),
        availability_schedule=availability_schedule or None,
    )

    # Files hit the disk only once every field is valid
    image_upload = await read_upload(image, "image")
    video_upload = await read_upload(video, "video")
    item.image_url = store_upload(image_upload)
    item.video_url = store_upload(video_upload)

    db.add(item)
    await db.commit()
    await db.refresh(item)

    logger.info("Menu item created", menu_id=str(item.id), restaurant_id=str(item.restaurant_id))
    return MenuEnvelope(menu=MenuItemResponse.model_validate(item))


@router.get("/{restaurant_id}", response_model=MenuListResponse)
async def list_menu_items(
    restaurant_id: UUID,
    name: Optional[str] = None,
    category: Optional[str] = None,
    availability: Optional[str] = Query(None, pattern="^(available|not_available)$"),
    dish_tag: Optional[str] = None,
    min_price: Optional[str] = None,
    max_price: Optional[str] = None,
    sort: str = Query("recent"),
    db: AsyncSession = Depends(get_db),
):
    """Public menu of a restaurant, including unavailable items"""
    if sort not in SORT_OPTIONS:
        raise HTTPException(status_code=400, detail=f"sort must be one of: {', '.join(SORT_OPTIONS)}")

    if not await db.get(Restaurant, restaurant_id):
        raise HTTPException(status_code=404, detail="Restaurant not found")

    menu_filter = MenuFilter(
        name=name,
        category=category,
        availability=availability,
        dish_tag=dish_tag,
        min_price_cents=parse_price(min_price) if min_price else None,
        max_price_cents=parse_price(max_price) if max_price else None,
    )

    result = await db.execute(select(MenuItem).where(MenuItem.restaurant_id == restaurant_id))
    items = filter_and_sort(result.scalars().all(), menu_filter, sort)

    return MenuListResponse(
        menus=[MenuItemResponse.model_validate(item) for item in items],
        total=len(items),
    )


@router.put("/{menu_id}", response_model=MenuEnvelope)
async def update_menu_item(
    menu_id: UUID,
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    is_available: Optional[str] = Form(None),
    dish_tags: Optional[str] = Form(None, alias="dishTags"),
    popularity: Optional[str] = Form(None),
    rating: Optional[str] = Form(None),
    availability_schedule: Optional[str] = Form(None, alias="availabilitySchedule"),
    image: Optional[UploadFile] = File(None),
    video: Optional[UploadFile] = File(None),
    session: UserSession = Depends(require_owner),
    db: AsyncSession = Depends(get_db),
):
    """Update a menu item; only the fields sent are changed"""
    has_image = image is not None and bool(image.filename)
    has_video = video is not None and bool(video.filename)
    fields = (name, description, category, price, is_available, dish_tags, popularity, rating, availability_schedule)
    if all(value is None for value in fields) and not has_image and not has_video:
        raise HTTPException(status_code=400, detail="No fields to update")

    item = await get_owned_item(db, menu_id, session)

    changes = {}
    if name is not None:
        changes["name"] = name
    if description is not None:
        changes["description"] = description
    if category is not None:
        changes["category"] = category
    if price is not None:
        changes["price_cents"] = parse_price(price)
    if parse_bool(is_available) is not None:
        changes["is_available"] = parse_bool(is_available)
    if dish_tags is not None:
        changes["dish_tags"] = parse_tags(dish_tags)
    if popularity:
        changes["popularity"] = parse_popularity(popularity)
    if rating is not None:
        changes["rating"] = parse_rating(rating)
    if availability_schedule is not None:
        changes["availability_schedule"] = availability_schedule or None

    image_upload = await read_upload(image, "image")
    video_upload = await read_upload(video, "video")
    if image_upload:
        changes["image_url"] = store_upload(image_upload)
    if video_upload:
        changes["video_url"] = store_upload(video_upload)

    for field, value in changes.items():
        setattr(item, field, value)

    await db.commit()
    await db.refresh(item)

    logger.info("Menu item updated", menu_id=str(item.id))
    return MenuEnvelope(menu=MenuItemResponse.model_validate(item))


@router.put("/{menu_id}/availability", response_model=MenuEnvelope)
async def update_availability(
    menu_id: UUID,
    request: AvailabilityUpdate,
    session: UserSession = Depends(require_owner),
    db: AsyncSession = Depends(get_db),
):
    """Mark a menu item as available or sold out"""
    item = await get_owned_item(db, menu_id, session)
    item.is_available = request.is_available

    await db.commit()
    await db.refresh(item)

    return MenuEnvelope(menu=MenuItemResponse.model_validate(item))


@router.delete("/{menu_id}", response_model=MenuDeleteResponse)
async def delete_menu_item(
    menu_id: UUID,
    session: UserSession = Depends(require_owner),
    db: AsyncSession = Depends(get_db),
):
    """Delete a menu item of the owner's restaurant"""
    item = await get_owned_item(db, menu_id, session)
    deleted = MenuItemResponse.model_validate(item)

    await db.delete(item)
    await db.commit()

    logger.info("Menu item deleted", menu_id=str(menu_id), restaurant_id=str(session.restaurant_id))
    return MenuDeleteResponse(message="Menu item deleted successfully", menu=deleted)
