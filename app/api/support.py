"""Support ticket API endpoints"""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
import structlog

from app.database import get_db
from app.models.session import UserSession
from app.models.support import SupportTicket
from app.models.user import UserRole
from app.schemas.support import (
    TicketCreate,
    TicketEnvelope,
    TicketListResponse,
    TicketResponse,
    TicketUpdate,
)
from app.api.auth import get_current_session, require_role, verify_restaurant_access

router = APIRouter()
logger = structlog.get_logger()


@router.post("", response_model=TicketEnvelope, status_code=201)
async def create_ticket(
    ticket_data: TicketCreate,
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Open a support ticket"""
    restaurant_id = ticket_data.restaurant_id or session.restaurant_id
    if restaurant_id is not None:
        verify_restaurant_access(session, restaurant_id)

    ticket = SupportTicket(
        user_id=session.user_id,
        restaurant_id=restaurant_id,
        subject=ticket_data.subject,
        message=ticket_data.message,
        status="Open",
    )
    db.add(ticket)
    await db.commit()
    await db.refresh(ticket)

    logger.info("Support ticket opened", ticket_id=str(ticket.id), user_id=str(session.user_id))
    return TicketEnvelope(ticket=TicketResponse.model_validate(ticket))


@router.get("", response_model=TicketListResponse)
async def list_tickets(
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Admins see all tickets; owners see the ones they opened"""
    query = select(SupportTicket)
    if session.role != UserRole.ADMIN.value:
        query = query.where(SupportTicket.user_id == session.user_id)

    result = await db.execute(query.order_by(SupportTicket.created_at.desc()))
    return TicketListResponse(
        tickets=[TicketResponse.model_validate(t) for t in result.scalars().all()]
    )


@router.patch("/{ticket_id}", response_model=TicketEnvelope)
async def update_ticket(
    ticket_id: UUID,
    ticket_data: TicketUpdate,
    session: UserSession = Depends(require_role(UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    """Open or close a ticket (admin only)"""
    ticket = await db.get(SupportTicket, ticket_id)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")

    ticket.status = ticket_data.status
    await db.commit()
    await db.refresh(ticket)

    return TicketEnvelope(ticket=TicketResponse.model_validate(ticket))
