"""Public helpers for emitting and reading notifications."""

from .create_notification import create_notification
from .list_notifications import list_notifications, mark_notifications_read

__all__ = [
    "create_notification",
    "list_notifications",
    "mark_notifications_read",
]
