"""Subscription plans and plan features"""

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.billing import Subscription, PlanFeature
from app.schemas.billing import (
    PlanFeatureListResponse,
    PlanFeatureResponse,
    SubscriptionListResponse,
    SubscriptionResponse,
)

router = APIRouter()


@router.get("/subscriptions", response_model=SubscriptionListResponse)
async def list_subscriptions(db: AsyncSession = Depends(get_db)):
    """Active subscription plans"""
    result = await db.execute(
        select(Subscription)
        .where(Subscription.is_active == True)
        .order_by(Subscription.price_cents)
    )
    return SubscriptionListResponse(
        subscriptions=[SubscriptionResponse.model_validate(s) for s in result.scalars().all()]
    )


@router.get("/plan_features/{plan}", response_model=PlanFeatureListResponse)
async def list_plan_features(plan: str, db: AsyncSession = Depends(get_db)):
    """Features included in a plan"""
    result = await db.execute(
        select(PlanFeature)
        .where(PlanFeature.plan_name == plan)
        .order_by(PlanFeature.feature)
    )
    return PlanFeatureListResponse(
        features=[PlanFeatureResponse.model_validate(f) for f in result.scalars().all()]
    )
