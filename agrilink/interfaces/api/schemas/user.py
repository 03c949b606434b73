"""User schemas."""

from datetime import datetime

from pydantic import Field

from agrilink.domain.entities import UserRole
from agrilink.infrastructure.i18n import Locale

from .base import APIModel


class UserRead(APIModel):
    id: int
    email: str
    phone: str
    full_name: str
    role: UserRole
    profile_image: str | None = None
    language: str | None = None
    created_at: datetime | None = None


class UserSummaryRead(APIModel):
    id: int
    full_name: str
    role: UserRole
    profile_image: str | None = None


class ProfileUpdate(APIModel):
    full_name: str | None = Field(default=None, min_length=2, max_length=100)
    phone: str | None = Field(default=None, pattern=r"^\d{10}$")
    profile_image: str | None = Field(default=None, max_length=500)
    language: Locale | None = None
