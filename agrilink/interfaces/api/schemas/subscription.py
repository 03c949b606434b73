"""Pydantic models describing subscription payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from agrilink.domain.entities import SubscriptionStatus

from .base import APIModel


class SubscriptionRead(APIModel):
    id: int
    user_id: int
    plan_id: str
    status: SubscriptionStatus
    start_date: datetime
    end_date: datetime
    amount: int
    payment_id: str | None = None
    created_at: datetime | None = None


class SubscriptionStatusRead(APIModel):
    """Status of the caller's subscription; ``expires_at`` is only sent when active."""

    is_active: bool
    subscription: SubscriptionRead | None
    days_remaining: int
    expires_at: datetime | None = None


class SubscriptionPlanRead(APIModel):
    id: str
    name: str
    description: str
    price: int
    duration: int = Field(..., description="Length of the plan in days")
    features: list[str]


class SubscriptionPlanListRead(APIModel):
    plans: list[SubscriptionPlanRead]
    current_subscription: SubscriptionRead | None = None


class SubscribeRequest(APIModel):
    plan_id: str = Field(..., min_length=1)
    payment_id: str | None = Field(default=None, max_length=100)


class SubscriptionSweepRead(APIModel):
    message: str
    expired: int = 0
    downgraded: int = 0
    warned: int = 0
