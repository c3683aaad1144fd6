"""Inbound webhook events from payment and notification providers"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.models.support import WebhookEvent
from app.schemas.auth import MessageResponse
from app.schemas.support import WebhookCreate

router = APIRouter()
logger = structlog.get_logger()


@router.post("", response_model=MessageResponse)
async def receive_webhook(
    event: WebhookCreate,
    db: AsyncSession = Depends(get_db),
):
    """Store a provider event for later processing"""
    logger.info("Webhook received", provider=event.provider, event_type=event.event_type)

    db.add(
        WebhookEvent(
            provider=event.provider,
            event_type=event.event_type,
            payload=event.payload,
        )
    )
    await db.commit()

    return MessageResponse(message="Webhook event recorded")
