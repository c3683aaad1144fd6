"""Order management API endpoints"""

from typing import Optional
from uuid import UUID
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
import structlog

from app.database import get_db
from app.models.menu import MenuItem
from app.models.order import Order, OrderItem, OrderStatus, OrderStatusValue, OrderPriority
from app.models.restaurant import Restaurant
from app.models.session import UserSession
from app.models.user import UserRole
from app.schemas.order import (
    OrderAssign,
    OrderCreate,
    OrderEnvelope,
    OrderHistoryResponse,
    OrderItemResponse,
    OrderListResponse,
    OrderResponse,
    OrderStatusResponse,
    OrderStatusUpdate,
    OrderUpdate,
    StatusEnvelope,
)
from app.services.pricing import MAX_CENTS
from app.api.auth import get_current_session, verify_restaurant_access

router = APIRouter()
logger = structlog.get_logger()


def order_to_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        restaurant_id=order.restaurant_id,
        table_number=order.table_number,
        customer_name=order.customer_name,
        customer_contact=order.customer_contact,
        special_requests=order.special_requests,
        kitchen_section=order.kitchen_section,
        staff_member=order.staff_member,
        total_cents=order.total_cents,
        status=order.status.status if order.status else None,
        priority=order.status.priority if order.status else None,
        items=[OrderItemResponse.model_validate(item) for item in order.items],
        created_at=order.created_at,
        updated_at=order.updated_at,
    )


def _with_details(query):
    return query.options(selectinload(Order.items), selectinload(Order.status))


async def load_order(db: AsyncSession, order_id: UUID, restaurant_id: Optional[UUID] = None) -> Optional[Order]:
    query = _with_details(select(Order).where(Order.id == order_id))
    if restaurant_id is not None:
        query = query.where(Order.restaurant_id == restaurant_id)

    result = await db.execute(query)
    return result.scalar_one_or_none()


async def get_scoped_order(db: AsyncSession, order_id: UUID, session: UserSession) -> Order:
    """Load an order visible to the session; other restaurants' orders read as missing"""
    scope = None if session.role == UserRole.ADMIN.value else session.restaurant_id
    order = await load_order(db, order_id, scope)

    if not order:
        raise HTTPException(status_code=404, detail="Order not found")

    return order


def _filtered_query(
    session: UserSession,
    restaurant_id: Optional[UUID],
    status: Optional[str],
    start_date: Optional[datetime],
    end_date: Optional[datetime],
    customer_name: Optional[str],
):
    query = select(Order)

    if session.role == UserRole.ADMIN.value:
        if restaurant_id:
            query = query.where(Order.restaurant_id == restaurant_id)
    else:
        if restaurant_id:
            verify_restaurant_access(session, restaurant_id)
        query = query.where(Order.restaurant_id == session.restaurant_id)

    if status:
        query = query.join(OrderStatus, OrderStatus.order_id == Order.id).where(OrderStatus.status == status)

    if start_date:
        query = query.where(Order.created_at >= start_date)

    if end_date:
        query = query.where(Order.created_at <= end_date)

    if customer_name:
        query = query.where(Order.customer_name.ilike(f"%{customer_name}%"))

    return query


@router.post("", response_model=OrderEnvelope, status_code=201)
async def place_order(
    order_data: OrderCreate,
    db: AsyncSession = Depends(get_db),
):
    """Place an order from a table's QR menu (no login required)"""
    restaurant = await db.get(Restaurant, order_data.restaurant_id)
    if not restaurant or not restaurant.is_active:
        raise HTTPException(status_code=404, detail="Restaurant not found")

    if not order_data.items:
        raise HTTPException(status_code=400, detail="Order must contain at least one item")

    menu_ids = {item.menu_id for item in order_data.items}
    result = await db.execute(
        select(MenuItem).where(
            MenuItem.id.in_(menu_ids),
            MenuItem.restaurant_id == restaurant.id,
        )
    )
    menu = {item.id: item for item in result.scalars().all()}

    missing = [str(menu_id) for menu_id in menu_ids if menu_id not in menu]
    if missing:
        raise HTTPException(status_code=400, detail=f"Unknown menu items: {', '.join(sorted(missing))}")

    unavailable = sorted(menu[menu_id].name for menu_id in menu_ids if not menu[menu_id].is_available)
    if unavailable:
        raise HTTPException(status_code=400, detail=f"Items not available: {', '.join(unavailable)}")

    customer = order_data.customer_details
    order = Order(
        restaurant_id=restaurant.id,
        table_number=order_data.table_number,
        customer_name=customer.name if customer else None,
        customer_contact=customer.contact if customer else None,
        special_requests=order_data.special_requests,
    )

    total = 0
    for line in order_data.items:
        menu_item = menu[line.menu_id]
        order.items.append(
            OrderItem(
                menu_id=menu_item.id,
                name=menu_item.name,
                quantity=line.quantity,
                price_cents=menu_item.price_cents,
                special_requests=order_data.special_requests,
            )
        )
        total += menu_item.price_cents * line.quantity

    if total > MAX_CENTS:
        raise HTTPException(status_code=400, detail="Order total too large")

    order.total_cents = total
    order.status = OrderStatus(
        status=OrderStatusValue.PENDING.value,
        priority=OrderPriority.NORMAL.value,
        time_elapsed=0,
    )

    # Order, items and status are committed together
    db.add(order)
    await db.commit()

    order = await load_order(db, order.id)

    logger.info(
        "Order placed",
        order_id=str(order.id),
        restaurant_id=str(restaurant.id),
        items=len(order.items),
        total_cents=total,
    )
    return OrderEnvelope(message="Order placed successfully", order=order_to_response(order))


@router.get("", response_model=OrderListResponse)
async def list_orders(
    restaurant_id: Optional[UUID] = None,
    status: Optional[str] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    customer_name: Optional[str] = None,
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """List orders with pagination; owners see their restaurant only"""
    query = _filtered_query(session, restaurant_id, status, start_date, end_date, customer_name)

    total_result = await db.execute(select(func.count()).select_from(query.subquery()))
    total = total_result.scalar()

    offset = (page - 1) * page_size
    query = _with_details(query).order_by(Order.created_at.desc()).offset(offset).limit(page_size)

    result = await db.execute(query)
    orders = result.scalars().all()

    return OrderListResponse(
        items=[order_to_response(order) for order in orders],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/history", response_model=OrderHistoryResponse)
async def order_history(
    restaurant_id: Optional[UUID] = None,
    status: Optional[str] = None,
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
    customer_name: Optional[str] = None,
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Full, unpaginated order history"""
    query = _filtered_query(session, restaurant_id, status, start_date, end_date, customer_name)
    result = await db.execute(_with_details(query).order_by(Order.created_at.desc()))
    return OrderHistoryResponse(orders=[order_to_response(order) for order in result.scalars().all()])


@router.get("/{order_id}", response_model=OrderEnvelope)
async def get_order(
    order_id: UUID,
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Get order details"""
    order = await get_scoped_order(db, order_id, session)
    return OrderEnvelope(order=order_to_response(order))


@router.patch("/{order_id}", response_model=OrderEnvelope)
async def update_order(
    order_id: UUID,
    order_data: OrderUpdate,
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Update table number, special requests or item quantities"""
    order = await get_scoped_order(db, order_id, session)
    changes = order_data.model_dump(exclude_unset=True)

    quantities = {item.menu_id: item.quantity for item in order.items}
    if order_data.items:
        unknown = [str(line.menu_id) for line in order_data.items if line.menu_id not in quantities]
        if unknown:
            raise HTTPException(status_code=400, detail=f"Items not in order: {', '.join(unknown)}")

        quantities.update((line.menu_id, line.quantity) for line in order_data.items)

    total = sum(item.price_cents * quantities[item.menu_id] for item in order.items)
    if total > MAX_CENTS:
        raise HTTPException(status_code=400, detail="Order total too large")

    if changes.get("table_number") is not None:
        order.table_number = order_data.table_number

    if "special_requests" in changes:
        order.special_requests = order_data.special_requests
        for item in order.items:
            item.special_requests = order_data.special_requests

    if order_data.items:
        for item in order.items:
            item.quantity = quantities[item.menu_id]
        order.total_cents = total

    await db.commit()
    order = await get_scoped_order(db, order_id, session)

    logger.info("Order updated", order_id=str(order_id))
    return OrderEnvelope(message="Order updated successfully", order=order_to_response(order))


@router.patch("/{order_id}/status", response_model=StatusEnvelope)
async def update_order_status(
    order_id: UUID,
    status_data: OrderStatusUpdate,
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Move an order through the kitchen workflow"""
    order = await get_scoped_order(db, order_id, session)

    if order.status is None:
        raise HTTPException(status_code=404, detail="Order not found")

    order.status.status = status_data.status.value
    if status_data.priority is not None:
        order.status.priority = status_data.priority.value
    order.status.time_elapsed = int((datetime.utcnow() - order.created_at).total_seconds() // 60)

    await db.commit()
    await db.refresh(order.status)

    logger.info(
        "Order status updated",
        order_id=str(order_id),
        status=order.status.status,
        priority=order.status.priority,
    )
    return StatusEnvelope(
        message="Order status updated",
        status=OrderStatusResponse.model_validate(order.status),
    )


@router.patch("/{order_id}/assign", response_model=OrderEnvelope)
async def assign_order(
    order_id: UUID,
    assignment: OrderAssign,
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Assign an order to a kitchen section and staff member"""
    order = await get_scoped_order(db, order_id, session)

    for field, value in assignment.model_dump(exclude_unset=True).items():
        setattr(order, field, value)

    await db.commit()
    order = await get_scoped_order(db, order_id, session)

    return OrderEnvelope(message="Order assigned", order=order_to_response(order))
