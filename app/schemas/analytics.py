"""Analytics schemas"""

from typing import Optional, List, Union
from uuid import UUID
from pydantic import BaseModel


class Metric(BaseModel):
    """One bar of the dashboard chart"""
    metric: str
    value: Union[int, float]


class TopItem(BaseModel):
    name: str
    quantity: int
    revenue_cents: int


class AnalyticsResponse(BaseModel):
    restaurant_id: Optional[UUID]
    analytics: List[Metric]
    top_items: List[TopItem]
