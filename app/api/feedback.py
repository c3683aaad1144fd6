"""Customer feedback API endpoints"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.models.order import Order
from app.models.support import Feedback
from app.schemas.support import FeedbackCreate, FeedbackEnvelope, FeedbackResponse

router = APIRouter()
logger = structlog.get_logger()


@router.post("", response_model=FeedbackEnvelope, status_code=201)
async def submit_feedback(
    feedback_data: FeedbackCreate,
    db: AsyncSession = Depends(get_db),
):
    """Rate an order (no login required)"""
    order = await db.get(Order, feedback_data.order_id)
    if not order or order.restaurant_id != feedback_data.restaurant_id:
        raise HTTPException(status_code=404, detail="Order not found")

    feedback = Feedback(**feedback_data.model_dump())
    db.add(feedback)
    await db.commit()
    await db.refresh(feedback)

    logger.info("Feedback received", order_id=str(order.id), rating=feedback.rating)
    return FeedbackEnvelope(feedback=FeedbackResponse.model_validate(feedback))
