"""Use case for purchasing a subscription plan."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from agrilink.application.use_cases.notifications import create_notification
from agrilink.domain.entities import (
    NotificationType,
    Subscription,
    SubscriptionStatus,
    User,
    UserRole,
    get_plan,
)
from agrilink.infrastructure.repositories import SubscriptionRepository, UserRepository
from agrilink.utils import ensure_app_timezone, now_in_app_timezone


class PlanNotFoundError(ValueError):
    """Raised when the requested plan does not exist."""


def subscribe(
    session: Session,
    *,
    user: User,
    plan_id: str,
    payment_id: str | None = None,
    now: datetime | None = None,
) -> Subscription:
    """Create a subscription for ``user`` and grant the farmer role.

    A purchase made while another subscription is active starts when that one
    ends, so paid days are never lost.
    """

    plan = get_plan(plan_id)
    if plan is None:
        raise PlanNotFoundError("Plan not found")

    current_time = ensure_app_timezone(now) if now is not None else now_in_app_timezone()
    repository = SubscriptionRepository(session)
    existing = repository.get_current_active(user.id, now=current_time)
    start_date = existing.end_date if existing is not None else current_time

    subscription = repository.create(
        Subscription(
            id=None,
            user_id=user.id,
            plan_id=plan.id,
            status=SubscriptionStatus.ACTIVE,
            start_date=start_date,
            end_date=start_date + plan.duration,
            amount=plan.price,
            payment_id=payment_id,
            created_at=current_time,
        )
    )

    if user.role is UserRole.CUSTOMER:
        UserRepository(session).set_role(user.id, UserRole.FARMER)

    create_notification(
        session,
        user_id=user.id,
        type=NotificationType.SYSTEM,
        title="Subscription activated",
        message=f"Your {plan.name} plan is active until {subscription.end_date:%d %b %Y}.",
        link="/subscription",
    )
    return subscription
