"""Endpoints for the notification inbox."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from agrilink.application.use_cases.notifications import (
    list_notifications,
    mark_notifications_read,
)
from agrilink.domain.entities import User
from agrilink.infrastructure.database import get_db
from agrilink.interfaces.api.dependencies import get_current_user
from agrilink.interfaces.api.schemas import (
    NotificationListRead,
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/", response_model=NotificationListRead)
def read_notifications(
    limit: int = Query(20, ge=1, le=100),
    unread: bool = Query(False, description="Only return unread notifications"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationListRead:
    """Return the most recent notifications for the authenticated user."""

    notifications, unread_count = list_notifications(
        db, current_user.id, limit=limit, unread_only=unread
    )
    return NotificationListRead(
        notifications=[NotificationRead.model_validate(n) for n in notifications],
        unread_count=unread_count,
    )


@router.put("/read", response_model=NotificationMarkReadResponse)
def mark_read(
    payload: NotificationMarkReadRequest | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> NotificationMarkReadResponse:
    """Mark the listed notifications, or every unread one, as read."""

    ids = payload.unique_ids() if payload is not None else None
    updated = mark_notifications_read(db, current_user.id, ids)
    return NotificationMarkReadResponse(updated=updated)
