"""Payment API endpoints"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.models.billing import Payment
from app.models.restaurant import Restaurant
from app.models.session import UserSession
from app.models.user import UserRole
from app.schemas.billing import PaymentCreate, PaymentEnvelope, PaymentListResponse, PaymentResponse
from app.services.pricing import to_cents
from app.api.auth import get_current_session, require_role, verify_restaurant_access

router = APIRouter()
logger = structlog.get_logger()


@router.post("", response_model=PaymentEnvelope, status_code=201)
async def record_payment(
    payment_data: PaymentCreate,
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Record a successful subscription payment"""
    restaurant_id = payment_data.restaurant_id or session.restaurant_id

    if restaurant_id is not None:
        if not await db.get(Restaurant, restaurant_id):
            raise HTTPException(status_code=404, detail="Restaurant not found")
        verify_restaurant_access(session, restaurant_id)

    payment = Payment(
        user_id=session.user_id,
        restaurant_id=restaurant_id,
        amount_cents=to_cents(payment_data.amount),
        status="Success",
        provider=payment_data.provider,
        transaction_id=payment_data.transaction_id,
    )
    db.add(payment)
    await db.commit()
    await db.refresh(payment)

    logger.info(
        "Payment recorded",
        payment_id=str(payment.id),
        restaurant_id=str(restaurant_id) if restaurant_id else None,
        amount_cents=payment.amount_cents,
        provider=payment.provider,
    )
    return PaymentEnvelope(payment=PaymentResponse.model_validate(payment))


@router.get("", response_model=PaymentListResponse)
async def list_payments(
    restaurant_id: Optional[UUID] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    session: UserSession = Depends(require_role(UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    """List payments across the platform (admin only)"""
    query = select(Payment)
    if restaurant_id:
        query = query.where(Payment.restaurant_id == restaurant_id)

    result = await db.execute(query.order_by(Payment.created_at.desc()).offset(skip).limit(limit))
    return PaymentListResponse(
        payments=[PaymentResponse.model_validate(p) for p in result.scalars().all()]
    )
