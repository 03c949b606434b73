"""SQLAlchemy model for farmer subscriptions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from agrilink.infrastructure.database import Base
from agrilink.utils import now_in_app_naive_datetime


class SubscriptionModel(Base):
    """Database representation of a paid subscription period."""

    __tablename__ = "subscription"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    plan_id = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False, default="active", index=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    payment_id = Column(String(100), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["SubscriptionModel"]
