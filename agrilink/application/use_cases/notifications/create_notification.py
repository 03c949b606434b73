"""Best-effort persistence of user notifications."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from agrilink.domain.entities import Notification, NotificationType
from agrilink.infrastructure.repositories import NotificationRepository
from agrilink.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def create_notification(
    session: Session,
    *,
    user_id: int,
    type: NotificationType | str,
    title: str,
    message: str,
    link: str | None = None,
) -> None:
    """Persist a notification for ``user_id`` without ever raising.

    Callers fire this after their own work has succeeded; a failure here is
    logged and the session rolled back so it remains usable by the caller.
    """

    try:
        notification = Notification(
            id=None,
            user_id=user_id,
            type=NotificationType(type),
            title=title,
            message=message,
            link=link,
            is_read=False,
            created_at=now_in_app_timezone(),
        )
        NotificationRepository(session).create(notification)
    except Exception:
        logger.exception("Failed to create notification for user %s", user_id)
        try:
            session.rollback()
        except Exception:
            logger.exception("Failed to roll back session after notification error")
