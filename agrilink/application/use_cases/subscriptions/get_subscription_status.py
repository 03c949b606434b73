"""Use case reporting whether a user currently holds an active subscription."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from agrilink.domain.entities import SubscriptionStatusReport, compute_subscription_status
from agrilink.infrastructure.repositories import SubscriptionRepository
from agrilink.utils import ensure_app_timezone, now_in_app_timezone


def get_subscription_status(
    session: Session, user_id: int, *, now: datetime | None = None
) -> SubscriptionStatusReport:
    """Return the status report of the latest-ending active subscription."""

    current_time = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    subscription = SubscriptionRepository(session).get_current_active(
        user_id, now=current_time
    )
    return compute_subscription_status(subscription, current_time)
