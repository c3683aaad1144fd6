"""Support ticket, activity log, feedback and webhook schemas"""

from datetime import datetime
from typing import Optional, List, Any, Literal
from uuid import UUID
from pydantic import BaseModel, Field


class TicketCreate(BaseModel):
    restaurant_id: Optional[UUID] = None
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class TicketUpdate(BaseModel):
    status: Literal["Open", "Closed"]


class TicketResponse(BaseModel):
    id: UUID
    user_id: UUID
    restaurant_id: Optional[UUID]
    subject: str
    message: str
    status: str
    created_at: datetime

    class Config:
        from_attributes = True


class TicketEnvelope(BaseModel):
    ticket: TicketResponse


class TicketListResponse(BaseModel):
    tickets: List[TicketResponse]


class LogCreate(BaseModel):
    level: Literal["debug", "info", "warning", "error"] = "info"
    action: str = Field(..., min_length=1)
    details: Optional[Any] = None


class LogResponse(BaseModel):
    id: UUID
    user_id: Optional[UUID]
    level: str
    action: str
    details: Optional[Any]
    created_at: datetime

    class Config:
        from_attributes = True


class LogEnvelope(BaseModel):
    log: LogResponse


class FeedbackCreate(BaseModel):
    order_id: UUID
    restaurant_id: UUID
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None


class FeedbackResponse(BaseModel):
    id: UUID
    order_id: UUID
    restaurant_id: UUID
    rating: int
    comment: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class FeedbackEnvelope(BaseModel):
    feedback: FeedbackResponse


class WebhookCreate(BaseModel):
    provider: str = Field(..., min_length=1)
    event_type: str = Field(..., min_length=1)
    payload: Optional[Any] = None
