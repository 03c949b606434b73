"""Session-scoped container for the signed-in user's profile."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable

from agrilink.domain.entities import User, UserRole


@dataclass(frozen=True)
class UserSnapshot:
    """Profile fields the client keeps around for the current session."""

    id: int
    email: str
    phone: str
    full_name: str
    role: UserRole
    profile_image: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserSnapshot":
        return cls(
            id=user.id,
            email=user.email,
            phone=user.phone,
            full_name=user.full_name,
            role=user.role,
            profile_image=user.profile_image,
        )


@dataclass(frozen=True)
class UserState:
    user: UserSnapshot | None = None
    is_loading: bool = True


Listener = Callable[[UserState], Any]


class UserStore:
    """Mutable cell holding at most one user snapshot plus a loading flag.

    Each store is created explicitly and handed to whoever needs it. Writes are
    last-write-wins and listeners run synchronously after every mutation.
    """

    def __init__(self, state: UserState | None = None) -> None:
        self._state = state or UserState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> UserState:
        return self._state

    @property
    def user(self) -> UserSnapshot | None:
        return self._state.user

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def set_user(self, user: UserSnapshot | None) -> None:
        """Replace the whole user and mark loading as finished."""

        self._set(UserState(user=user, is_loading=False))

    def set_loading(self, loading: bool) -> None:
        self._set(replace(self._state, is_loading=loading))

    def update_user(self, **changes: Any) -> None:
        """Merge ``changes`` into the current user; nothing happens when signed out."""

        if self._state.user is None:
            return
        self._set(replace(self._state, user=replace(self._state.user, **changes)))

    def logout(self) -> None:
        self._set(replace(self._state, user=None))

    def _set(self, state: UserState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)


__all__ = ["UserSnapshot", "UserState", "UserStore"]
