"""Use cases for reading conversations."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from agrilink.domain.entities import Conversation, Message
from agrilink.infrastructure.repositories import MessageRepository

_EPOCH = datetime.min


def get_conversation(session: Session, *, user_id: int, peer_id: int) -> Sequence[Message]:
    """Return the thread with ``peer_id`` and mark the peer's messages as read."""

    repository = MessageRepository(session)
    messages = repository.list_between(user_id, peer_id)
    repository.mark_read_from(receiver_id=user_id, sender_id=peer_id)
    return messages


def list_conversations(session: Session, *, user_id: int) -> list[Conversation]:
    """Return one entry per peer, most recently active first."""

    repository = MessageRepository(session)
    conversations = [
        Conversation(
            peer_id=peer_id,
            last_message=repository.latest_between(user_id, peer_id),
            unread_count=repository.count_unread_for(user_id, sender_id=peer_id),
        )
        for peer_id in repository.list_peer_ids(user_id)
    ]
    conversations.sort(key=_last_activity, reverse=True)
    return conversations


def _last_activity(conversation: Conversation) -> datetime:
    last = conversation.last_message
    if last is None or last.created_at is None:
        return _EPOCH
    return last.created_at.replace(tzinfo=None)
