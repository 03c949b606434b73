"""Domain entity representing a direct message between two users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Message:
    """Text sent by ``sender_id`` to ``receiver_id``."""

    id: int | None
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool = False
    created_at: datetime | None = None


@dataclass
class Conversation:
    """Latest message exchanged with a peer plus the unread tally from them."""

    peer_id: int
    last_message: Message | None
    unread_count: int


__all__ = ["Conversation", "Message"]
