"""Use cases for direct messaging."""

from .conversations import get_conversation, list_conversations
from .count_unread_messages import count_unread_messages
from .errors import MessagingNotAllowedError, RecipientNotFoundError
from .send_message import can_message, send_message

__all__ = [
    "MessagingNotAllowedError",
    "RecipientNotFoundError",
    "can_message",
    "count_unread_messages",
    "get_conversation",
    "list_conversations",
    "send_message",
]
