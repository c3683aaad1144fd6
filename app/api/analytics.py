"""Dashboard analytics"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy import case, select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.menu import MenuItem
from app.models.order import Order, OrderItem, OrderStatus, OrderStatusValue
from app.models.restaurant import Restaurant
from app.models.session import UserSession
from app.models.support import Feedback
from app.models.user import UserRole
from app.schemas.analytics import AnalyticsResponse, Metric, TopItem
from app.services.pricing import from_cents
from app.api.auth import get_current_session, verify_restaurant_access

router = APIRouter()


def _scoped(query, column, restaurant_id: Optional[UUID]):
    return query.where(column == restaurant_id) if restaurant_id else query


@router.get("", response_model=AnalyticsResponse)
async def get_analytics(
    restaurant_id: Optional[UUID] = None,
    top: int = Query(5, ge=1, le=50),
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """
    Key figures for the dashboard chart.

    Owners always get their own restaurant. Admins get platform-wide
    figures unless they pass `restaurant_id`.
    """
    if session.role != UserRole.ADMIN.value:
        if restaurant_id:
            verify_restaurant_access(session, restaurant_id)
        restaurant_id = session.restaurant_id

    status_counts = await db.execute(
        _scoped(
            select(OrderStatus.status, func.count(Order.id), func.coalesce(func.sum(Order.total_cents), 0))
            .join(OrderStatus, OrderStatus.order_id == Order.id)
            .group_by(OrderStatus.status),
            Order.restaurant_id,
            restaurant_id,
        )
    )
    total_orders = 0
    pending_orders = 0
    billed_orders = 0
    revenue_cents = 0
    for status, count, total_cents in status_counts.all():
        total_orders += count
        if status == OrderStatusValue.PENDING.value:
            pending_orders += count
        if status != OrderStatusValue.CANCELLED.value:
            billed_orders += count
            revenue_cents += int(total_cents or 0)

    menu_counts = await db.execute(
        _scoped(
            select(
                func.count(MenuItem.id),
                func.coalesce(func.sum(case((MenuItem.is_available == True, 1), else_=0)), 0),
            ),
            MenuItem.restaurant_id,
            restaurant_id,
        )
    )
    menu_items, available_menu_items = menu_counts.one()

    average_rating = (
        await db.execute(
            _scoped(select(func.avg(Feedback.rating)), Feedback.restaurant_id, restaurant_id)
        )
    ).scalar()

    top_rows = await db.execute(
        _scoped(
            select(
                OrderItem.name,
                func.sum(OrderItem.quantity).label("quantity"),
                func.sum(OrderItem.quantity * OrderItem.price_cents).label("revenue_cents"),
            )
            .join(Order, Order.id == OrderItem.order_id)
            .group_by(OrderItem.name)
            .order_by(func.sum(OrderItem.quantity).desc(), OrderItem.name)
            .limit(top),
            Order.restaurant_id,
            restaurant_id,
        )
    )

    analytics = [
        Metric(metric="total_orders", value=total_orders),
        Metric(metric="pending_orders", value=pending_orders),
        Metric(metric="total_revenue", value=float(from_cents(revenue_cents))),
        Metric(
            metric="average_order_value",
            value=float(from_cents(revenue_cents // billed_orders)) if billed_orders else 0.0,
        ),
        Metric(metric="menu_items", value=menu_items or 0),
        Metric(metric="available_menu_items", value=available_menu_items or 0),
        Metric(metric="average_rating", value=round(float(average_rating), 2) if average_rating else 0.0),
    ]

    if restaurant_id is None:
        restaurants = (await db.execute(select(func.count(Restaurant.id)))).scalar()
        analytics.append(Metric(metric="restaurants", value=restaurants or 0))

    return AnalyticsResponse(
        restaurant_id=restaurant_id,
        analytics=analytics,
        top_items=[
            TopItem(name=name, quantity=int(quantity or 0), revenue_cents=int(revenue or 0))
            for name, quantity, revenue in top_rows.all()
        ],
    )
