"""Single-slot toast channel."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class ToastType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True)
class Toast:
    message: str = ""
    type: ToastType = ToastType.INFO
    is_visible: bool = False


class ToastNotifier:
    """Show at most one toast at a time.

    ``show`` replaces whatever is on screen; nothing is queued. ``dismiss``
    hides the toast but keeps its last message and type.
    """

    def __init__(self) -> None:
        self._toast = Toast()

    @property
    def current(self) -> Toast:
        return self._toast

    @property
    def is_visible(self) -> bool:
        return self._toast.is_visible

    def show(self, message: str, type: ToastType | str = ToastType.INFO) -> Toast:
        self._toast = Toast(message=message, type=ToastType(type), is_visible=True)
        return self._toast

    def dismiss(self) -> None:
        self._toast = replace(self._toast, is_visible=False)


__all__ = ["Toast", "ToastNotifier", "ToastType"]
