"""Use case for sending a direct message."""

from __future__ import annotations

from sqlalchemy.orm import Session

from agrilink.application.use_cases.notifications import create_notification
from agrilink.domain.entities import Message, NotificationType, User
from agrilink.infrastructure.repositories import MessageRepository, UserRepository
from agrilink.utils import now_in_app_timezone

from .errors import MessagingNotAllowedError, RecipientNotFoundError

_PREVIEW_LENGTH = 80


def can_message(sender: User, receiver: User) -> bool:
    """Return ``True`` when ``sender`` may start a conversation with ``receiver``.

    Farmers talk to anyone, anyone can reach a farmer and admins are unrestricted.
    """

    return sender.is_farmer() or receiver.is_farmer() or sender.is_admin()


def send_message(
    session: Session, *, sender: User, receiver_id: int, content: str
) -> Message:
    """Store ``content`` from ``sender`` to ``receiver_id`` and notify the receiver."""

    receiver = UserRepository(session).get(receiver_id)
    if receiver is None:
        raise RecipientNotFoundError("Recipient not found")
    if not can_message(sender, receiver):
        raise MessagingNotAllowedError(
            "You can only message farmers or customers you have orders with"
        )

    message = MessageRepository(session).create(
        Message(
            id=None,
            sender_id=sender.id,
            receiver_id=receiver.id,
            content=content,
            is_read=False,
            created_at=now_in_app_timezone(),
        )
    )

    preview = content if len(content) <= _PREVIEW_LENGTH else content[: _PREVIEW_LENGTH - 1] + "…"
    create_notification(
        session,
        user_id=receiver.id,
        type=NotificationType.NEW_MESSAGE,
        title=f"New message from {sender.full_name}",
        message=preview,
        link=f"/messages?userId={sender.id}",
    )
    return message
