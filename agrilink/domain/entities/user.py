"""Domain entity representing a marketplace user."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    """Roles a marketplace account can hold."""

    CUSTOMER = "customer"
    FARMER = "farmer"
    ADMIN = "admin"


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    email: str
    phone: str
    full_name: str
    role: UserRole
    profile_image: str | None = None
    language: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def has_role(self, role: UserRole | str) -> bool:
        """Return ``True`` when the user's role matches ``role``."""

        return self.role == UserRole(role)

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role(UserRole.ADMIN)

    def is_farmer(self) -> bool:
        return self.has_role(UserRole.FARMER)


__all__ = ["User", "UserRole"]
