"""ORM models used by the application infrastructure."""

from .message import MessageModel
from .notification import NotificationModel
from .subscription import SubscriptionModel
from .user import UserModel

__all__ = [
    "MessageModel",
    "NotificationModel",
    "SubscriptionModel",
    "UserModel",
]
