"""Domain entities exposed by the application."""

from .message import Conversation, Message
from .notification import Notification, NotificationType
from .subscription import (
    SUBSCRIPTION_PLANS,
    Subscription,
    SubscriptionPlan,
    SubscriptionStatus,
    SubscriptionStatusReport,
    compute_subscription_status,
    days_until,
    get_plan,
)
from .user import User, UserRole

__all__ = [
    "Conversation",
    "Message",
    "Notification",
    "NotificationType",
    "SUBSCRIPTION_PLANS",
    "Subscription",
    "SubscriptionPlan",
    "SubscriptionStatus",
    "SubscriptionStatusReport",
    "compute_subscription_status",
    "days_until",
    "get_plan",
    "User",
    "UserRole",
]
