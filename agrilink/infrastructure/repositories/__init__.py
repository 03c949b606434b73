"""Repository implementations for infrastructure layer."""

from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .subscription_repository import SubscriptionRepository
from .user_repository import UserRepository

__all__ = [
    "MessageRepository",
    "NotificationRepository",
    "SubscriptionRepository",
    "UserRepository",
]
