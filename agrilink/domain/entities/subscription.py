"""Domain entities describing paid farmer subscriptions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum

SECONDS_PER_DAY = 24 * 60 * 60


class SubscriptionStatus(str, Enum):
    """Lifecycle states of a subscription record."""

    ACTIVE = "active"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


@dataclass
class Subscription:
    """A paid period during which the owner enjoys farmer features."""

    id: int | None
    user_id: int
    plan_id: str
    status: SubscriptionStatus
    start_date: datetime
    end_date: datetime
    amount: int
    payment_id: str | None = None
    created_at: datetime | None = None

    def is_active_at(self, now: datetime) -> bool:
        """Return ``True`` when the status is active and the period has not ended."""

        return self.status is SubscriptionStatus.ACTIVE and self.end_date > now


@dataclass(frozen=True)
class SubscriptionPlan:
    """A purchasable subscription option."""

    id: str
    name: str
    description: str
    price: int
    duration_days: int
    features: tuple[str, ...] = field(default_factory=tuple)

    @property
    def duration(self) -> timedelta:
        return timedelta(days=self.duration_days)


SUBSCRIPTION_PLANS: tuple[SubscriptionPlan, ...] = (
    SubscriptionPlan(
        id="farmer_monthly",
        name="Farmer Monthly",
        description="Access to all farmer features for 1 month",
        price=199,
        duration_days=30,
        features=(
            "Create unlimited product posts",
            "Access to analytics dashboard",
            "Priority customer support",
            "Direct messaging with customers",
        ),
    ),
    SubscriptionPlan(
        id="farmer_quarterly",
        name="Farmer Quarterly",
        description="Access to all farmer features for 3 months",
        price=499,
        duration_days=90,
        features=(
            "All monthly plan features",
            "16% discount",
            "Featured profile badge",
        ),
    ),
    SubscriptionPlan(
        id="farmer_yearly",
        name="Farmer Yearly",
        description="Access to all farmer features for 1 year",
        price=1499,
        duration_days=365,
        features=(
            "All quarterly plan features",
            "37% discount",
            "Priority listing in search",
            "Verified farmer badge",
        ),
    ),
)


def get_plan(plan_id: str) -> SubscriptionPlan | None:
    """Return the plan identified by ``plan_id`` or ``None``."""

    return next((plan for plan in SUBSCRIPTION_PLANS if plan.id == plan_id), None)


@dataclass(frozen=True)
class SubscriptionStatusReport:
    """Outcome of evaluating a user's current subscription."""

    is_active: bool
    subscription: Subscription | None
    days_remaining: int
    expires_at: datetime | None = None


def days_until(end: datetime, now: datetime) -> int:
    """Return the number of started days between ``now`` and ``end``."""

    return math.ceil((end - now).total_seconds() / SECONDS_PER_DAY)


def compute_subscription_status(
    subscription: Subscription | None, now: datetime
) -> SubscriptionStatusReport:
    """Build the status report for ``subscription`` as observed at ``now``.

    A missing record, or one that is not active at ``now``, yields an inactive
    report with zero days remaining. Days remaining are rounded up so that a
    period ending in 2.5 days reports 3.
    """

    if subscription is None or not subscription.is_active_at(now):
        return SubscriptionStatusReport(
            is_active=False, subscription=None, days_remaining=0
        )

    return SubscriptionStatusReport(
        is_active=True,
        subscription=subscription,
        days_remaining=days_until(subscription.end_date, now),
        expires_at=subscription.end_date,
    )


__all__ = [
    "SUBSCRIPTION_PLANS",
    "Subscription",
    "SubscriptionPlan",
    "SubscriptionStatus",
    "SubscriptionStatusReport",
    "compute_subscription_status",
    "days_until",
    "get_plan",
]
