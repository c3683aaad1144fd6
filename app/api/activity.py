"""Activity log API endpoints"""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.audit import ActivityLog
from app.models.session import UserSession
from app.models.user import UserRole
from app.schemas.support import LogCreate, LogEnvelope, LogResponse
from app.api.auth import get_current_session, require_role

router = APIRouter()


@router.post("", response_model=LogEnvelope, status_code=201)
async def record_log(
    log_data: LogCreate,
    session: UserSession = Depends(get_current_session),
    db: AsyncSession = Depends(get_db),
):
    """Record an action performed in the dashboard"""
    entry = ActivityLog(
        user_id=session.user_id,
        level=log_data.level,
        action=log_data.action,
        details=log_data.details,
    )
    db.add(entry)
    await db.commit()
    await db.refresh(entry)

    return LogEnvelope(log=LogResponse.model_validate(entry))


@router.get("", response_model=List[LogResponse])
async def list_logs(
    limit: int = Query(100, ge=1, le=500),
    session: UserSession = Depends(require_role(UserRole.ADMIN)),
    db: AsyncSession = Depends(get_db),
):
    """Most recent activity (admin only)"""
    result = await db.execute(
        select(ActivityLog).order_by(ActivityLog.created_at.desc()).limit(limit)
    )
    return result.scalars().all()
