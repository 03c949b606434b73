"""Pydantic models describing messaging payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import APIModel
from .user import UserSummaryRead


class MessageCreate(APIModel):
    receiver_id: int = Field(..., ge=1)
    content: str = Field(..., min_length=1, max_length=2000)


class MessageRead(APIModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool
    created_at: datetime | None = None


class ConversationRead(APIModel):
    user: UserSummaryRead | None = None
    last_message: MessageRead | None = None
    unread_count: int


class ConversationListRead(APIModel):
    conversations: list[ConversationRead]


class MessageThreadRead(APIModel):
    messages: list[MessageRead]


class UnreadCountRead(APIModel):
    unread_count: int = 0
