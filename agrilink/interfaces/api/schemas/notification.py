"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from agrilink.domain.entities import NotificationType

from .base import APIModel


class NotificationRead(APIModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    type: NotificationType
    title: str
    message: str
    link: str | None = None
    is_read: bool
    created_at: datetime


class NotificationListRead(APIModel):
    notifications: list[NotificationRead]
    unread_count: int


class NotificationMarkReadRequest(APIModel):
    """Payload used to mark notifications as read; omit ``ids`` to mark all."""

    ids: list[int] | None = Field(default=None, description="Notification identifiers")

    def unique_ids(self) -> list[int] | None:
        """Return the identifiers without duplicates preserving order."""

        if self.ids is None:
            return None
        return list(dict.fromkeys(self.ids))


class NotificationMarkReadResponse(APIModel):
    updated: int
