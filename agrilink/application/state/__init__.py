"""Client-side state containers shared by UI code."""

from .toast import Toast, ToastNotifier, ToastType
from .user_store import UserSnapshot, UserState, UserStore

__all__ = [
    "Toast",
    "ToastNotifier",
    "ToastType",
    "UserSnapshot",
    "UserState",
    "UserStore",
]
