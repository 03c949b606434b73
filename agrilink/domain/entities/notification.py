"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    """Kinds of events a notification can describe."""

    ORDER_UPDATE = "order_update"
    NEW_FOLLOWER = "new_follower"
    NEW_LIKE = "new_like"
    NEW_COMMENT = "new_comment"
    SUBSCRIPTION_EXPIRY = "subscription_expiry"
    NEW_MESSAGE = "new_message"
    SYSTEM = "system"


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    user_id: int
    type: NotificationType
    title: str
    message: str
    link: str | None = None
    is_read: bool = False
    created_at: datetime | None = None


__all__ = ["Notification", "NotificationType"]
