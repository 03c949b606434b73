"""Use cases for farmer subscriptions."""

from .expire_subscriptions import (
    EXPIRY_WARNING_WINDOW,
    SubscriptionSweepResult,
    expire_subscriptions,
)
from .get_subscription_status import get_subscription_status
from .subscribe import PlanNotFoundError, subscribe

__all__ = [
    "EXPIRY_WARNING_WINDOW",
    "PlanNotFoundError",
    "SubscriptionSweepResult",
    "expire_subscriptions",
    "get_subscription_status",
    "subscribe",
]
