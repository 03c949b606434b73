"""Use case returning the number of unread messages of a user."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agrilink.infrastructure.repositories import MessageRepository

logger = logging.getLogger(__name__)


def count_unread_messages(session: Session, user_id: int | None) -> int:
    """Return how many messages addressed to ``user_id`` are unread.

    Anonymous callers get ``0``. Database failures are logged and reported as
    ``0`` as well, the badge is never worth failing a page for.
    """

    if user_id is None:
        return 0
    try:
        return MessageRepository(session).count_unread_for(user_id)
    except SQLAlchemyError:
        logger.exception("Unread messages lookup failed for user %s", user_id)
        return 0
