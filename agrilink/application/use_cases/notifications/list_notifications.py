"""Use cases for reading and acknowledging the notification inbox."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.orm import Session

from agrilink.domain.entities import Notification
from agrilink.infrastructure.repositories import NotificationRepository

MAX_NOTIFICATIONS_LIMIT = 100


def list_notifications(
    session: Session, user_id: int, *, limit: int = 20, unread_only: bool = False
) -> tuple[Sequence[Notification], int]:
    """Return the newest notifications of ``user_id`` and its unread total."""

    repository = NotificationRepository(session)
    bounded = max(1, min(limit, MAX_NOTIFICATIONS_LIMIT))
    notifications = repository.list_for_user(
        user_id, unread_only=unread_only, limit=bounded
    )
    return notifications, repository.count_unread_for_user(user_id)


def mark_notifications_read(
    session: Session, user_id: int, notification_ids: Iterable[int] | None = None
) -> int:
    """Mark the given notifications (or all of them) as read."""

    return NotificationRepository(session).mark_as_read(
        notification_ids, user_id=user_id
    )
