"""Scheduled sweep that closes ended subscriptions and warns about upcoming ones."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from agrilink.application.use_cases.notifications import create_notification
from agrilink.domain.entities import NotificationType, SubscriptionStatus, UserRole, days_until
from agrilink.infrastructure.repositories import SubscriptionRepository, UserRepository
from agrilink.utils import ensure_app_timezone, now_in_app_timezone

logger = logging.getLogger(__name__)

EXPIRY_WARNING_WINDOW = timedelta(days=3)


@dataclass(frozen=True)
class SubscriptionSweepResult:
    """Counters describing a sweep run."""

    expired: int
    downgraded: int
    warned: int


def expire_subscriptions(
    session: Session, *, now: datetime | None = None
) -> SubscriptionSweepResult:
    """Expire ended subscriptions, downgrade lapsed farmers and send reminders."""

    current_time = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    subscriptions = SubscriptionRepository(session)
    users = UserRepository(session)

    expired = 0
    downgraded = 0
    for subscription in subscriptions.list_expired_active(now=current_time):
        # Expiry and downgrade of one subscription are committed together.
        subscriptions.set_status(subscription.id, SubscriptionStatus.EXPIRED, commit=False)
        expired += 1

        other_active = subscriptions.get_current_active(
            subscription.user_id, now=current_time, exclude_id=subscription.id
        )
        owner = users.get(subscription.user_id) if other_active is None else None
        if owner is None or owner.role is not UserRole.FARMER:
            session.commit()
            continue

        users.set_role(owner.id, UserRole.CUSTOMER, commit=False)
        session.commit()
        downgraded += 1
        create_notification(
            session,
            user_id=owner.id,
            type=NotificationType.SUBSCRIPTION_EXPIRY,
            title="Subscription Expired",
            message="Your farmer subscription has expired. Renew to continue selling products.",
            link="/subscription",
        )

    expiring = subscriptions.list_active_ending_between(
        start=current_time, end=current_time + EXPIRY_WARNING_WINDOW
    )
    for subscription in expiring:
        days_left = days_until(subscription.end_date, current_time)
        plural = "" if days_left == 1 else "s"
        create_notification(
            session,
            user_id=subscription.user_id,
            type=NotificationType.SUBSCRIPTION_EXPIRY,
            title="Subscription Expiring Soon",
            message=(
                f"Your subscription expires in {days_left} day{plural}. "
                "Renew now to avoid losing access."
            ),
            link="/subscription",
        )

    result = SubscriptionSweepResult(
        expired=expired, downgraded=downgraded, warned=len(expiring)
    )
    logger.info(
        "Subscription sweep finished: %s expired, %s downgraded, %s warned",
        result.expired,
        result.downgraded,
        result.warned,
    )
    return result
