"""Errors raised by the messaging use cases."""


class RecipientNotFoundError(ValueError):
    """Raised when the addressed user does not exist."""


class MessagingNotAllowedError(ValueError):
    """Raised when the sender may not contact the recipient."""


__all__ = ["MessagingNotAllowedError", "RecipientNotFoundError"]
