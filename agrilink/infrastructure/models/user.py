"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, DateTime, Integer, String

from agrilink.infrastructure.database import Base
from agrilink.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of a marketplace account."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    phone = Column(String(20), nullable=False)
    full_name = Column(String(100), nullable=False)
    role = Column(String(20), nullable=False, default="customer")
    profile_image = Column(String(500), nullable=True)
    language = Column(String(5), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["UserModel"]
