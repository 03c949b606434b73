"""Persistence helpers for direct messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import and_, func, or_
from sqlalchemy.orm import Session

from agrilink.domain.entities import Message
from agrilink.infrastructure.models import MessageModel
from agrilink.utils import ensure_app_naive_datetime, ensure_app_timezone, now_in_app_timezone


class MessageRepository:
    """Provide read and write access to :class:`Message` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def count_unread_for(self, receiver_id: int, *, sender_id: int | None = None) -> int:
        query = (
            self.session.query(func.count(MessageModel.id))
            .filter(MessageModel.receiver_id == receiver_id)
            .filter(MessageModel.is_read.is_(False))
        )
        if sender_id is not None:
            query = query.filter(MessageModel.sender_id == sender_id)
        return int(query.scalar() or 0)

    def create(self, message: Message) -> Message:
        model = MessageModel(
            sender_id=message.sender_id,
            receiver_id=message.receiver_id,
            content=message.content,
            is_read=message.is_read,
            created_at=ensure_app_naive_datetime(
                message.created_at or now_in_app_timezone()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def list_between(self, user_id: int, peer_id: int) -> Sequence[Message]:
        """Return the thread between two users, oldest first."""

        query = (
            self.session.query(MessageModel)
            .filter(self._between(user_id, peer_id))
            .order_by(MessageModel.created_at.asc(), MessageModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def latest_between(self, user_id: int, peer_id: int) -> Message | None:
        model = (
            self.session.query(MessageModel)
            .filter(self._between(user_id, peer_id))
            .order_by(MessageModel.created_at.desc(), MessageModel.id.desc())
            .first()
        )
        return self._to_entity(model) if model else None

    def list_peer_ids(self, user_id: int) -> list[int]:
        """Return every user that exchanged at least one message with ``user_id``."""

        sent = self.session.query(MessageModel.receiver_id).filter(
            MessageModel.sender_id == user_id
        )
        received = self.session.query(MessageModel.sender_id).filter(
            MessageModel.receiver_id == user_id
        )
        peers: list[int] = []
        for (peer_id,) in sent.union(received).all():
            if peer_id != user_id and peer_id not in peers:
                peers.append(peer_id)
        return peers

    def mark_read_from(self, *, receiver_id: int, sender_id: int | None = None) -> int:
        """Flag unread messages addressed to ``receiver_id`` as read."""

        query = self.session.query(MessageModel).filter(
            MessageModel.receiver_id == receiver_id,
            MessageModel.is_read.is_(False),
        )
        if sender_id is not None:
            query = query.filter(MessageModel.sender_id == sender_id)
        updated = query.update({MessageModel.is_read: True}, synchronize_session=False)
        self.session.commit()
        return updated

    @staticmethod
    def _between(user_id: int, peer_id: int):
        return or_(
            and_(MessageModel.sender_id == user_id, MessageModel.receiver_id == peer_id),
            and_(MessageModel.sender_id == peer_id, MessageModel.receiver_id == user_id),
        )

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            sender_id=model.sender_id,
            receiver_id=model.receiver_id,
            content=model.content,
            is_read=bool(model.is_read),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["MessageRepository"]
