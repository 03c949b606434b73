"""Tests for subscribing, status lookup and the expiry sweep."""

from datetime import timedelta

import pytest
from sqlalchemy.exc import OperationalError

from agrilink.application.use_cases.notifications import list_notifications
from agrilink.application.use_cases.subscriptions import (
    PlanNotFoundError,
    expire_subscriptions,
    get_subscription_status,
    subscribe,
)
from agrilink.domain.entities import (
    NotificationType,
    Subscription,
    SubscriptionStatus,
    UserRole,
)
from agrilink.infrastructure import database
from agrilink.infrastructure.repositories import (
    NotificationRepository,
    SubscriptionRepository,
    UserRepository,
)
from agrilink.utils import now_in_app_timezone


def _store(session, user_id, *, end_offset, status=SubscriptionStatus.ACTIVE):
    now = now_in_app_timezone()
    return SubscriptionRepository(session).create(
        Subscription(
            id=None,
            user_id=user_id,
            plan_id="farmer_monthly",
            status=status,
            start_date=now - timedelta(days=30),
            end_date=now + end_offset,
            amount=199,
        )
    )


def test_subscribe_promotes_customer_and_stacks_periods(db_session, make_user):
    user = make_user()
    now = now_in_app_timezone()

    first = subscribe(db_session, user=user, plan_id="farmer_monthly", now=now)
    second = subscribe(db_session, user=user, plan_id="farmer_quarterly", now=now)

    assert first.end_date - first.start_date == timedelta(days=30)
    assert second.start_date == first.end_date
    assert second.end_date == first.end_date + timedelta(days=90)
    assert UserRepository(db_session).get(user.id).role is UserRole.FARMER

    report = get_subscription_status(db_session, user.id, now=now)
    assert report.subscription.id == second.id
    assert report.days_remaining == 120


def test_subscribe_keeps_admin_role(db_session, make_user):
    admin = make_user(UserRole.ADMIN)

    subscribe(db_session, user=admin, plan_id="farmer_yearly")

    assert UserRepository(db_session).get(admin.id).role is UserRole.ADMIN


def test_subscribe_unknown_plan(db_session, make_user):
    with pytest.raises(PlanNotFoundError):
        subscribe(db_session, user=make_user(), plan_id="farmer_forever")


def test_status_ignores_ended_and_cancelled_records(db_session, make_user):
    user = make_user(UserRole.FARMER)
    _store(db_session, user.id, end_offset=timedelta(days=-1))
    _store(db_session, user.id, end_offset=timedelta(days=10), status=SubscriptionStatus.CANCELLED)

    report = get_subscription_status(db_session, user.id)

    assert report.is_active is False
    assert report.days_remaining == 0


def test_sweep_expires_downgrades_and_warns(db_session, make_user):
    lapsed = make_user(UserRole.FARMER)
    renewed = make_user(UserRole.FARMER)
    expiring = make_user(UserRole.FARMER)
    _store(db_session, lapsed.id, end_offset=timedelta(hours=-1))
    _store(db_session, renewed.id, end_offset=timedelta(hours=-1))
    _store(db_session, renewed.id, end_offset=timedelta(days=20))
    _store(db_session, expiring.id, end_offset=timedelta(days=1, hours=12))

    result = expire_subscriptions(db_session)

    assert (result.expired, result.downgraded, result.warned) == (2, 1, 1)
    db_session.expire_all()
    users = UserRepository(db_session)
    assert users.get(lapsed.id).role is UserRole.CUSTOMER
    assert users.get(renewed.id).role is UserRole.FARMER

    lapsed_notes, _ = list_notifications(db_session, lapsed.id)
    assert [n.title for n in lapsed_notes] == ["Subscription Expired"]
    expiring_notes, _ = list_notifications(db_session, expiring.id)
    assert expiring_notes[0].type is NotificationType.SUBSCRIPTION_EXPIRY
    assert "expires in 2 days" in expiring_notes[0].message


def test_sweep_with_nothing_to_do(db_session, make_user):
    user = make_user(UserRole.FARMER)
    _store(db_session, user.id, end_offset=timedelta(days=60))

    result = expire_subscriptions(db_session)

    assert (result.expired, result.downgraded, result.warned) == (0, 0, 0)


def test_sweep_keeps_downgrade_when_notification_fails(db_session, make_user, monkeypatch):
    lapsed = make_user(UserRole.FARMER)
    _store(db_session, lapsed.id, end_offset=timedelta(hours=-1))

    def explode(self, notification):
        raise OperationalError("INSERT", {}, Exception("disk full"))

    monkeypatch.setattr(NotificationRepository, "create", explode)

    result = expire_subscriptions(db_session)

    assert (result.expired, result.downgraded) == (1, 1)
    fresh = database.SessionLocal()
    try:
        assert UserRepository(fresh).get(lapsed.id).role is UserRole.CUSTOMER
        assert SubscriptionRepository(fresh).list_expired_active(now=now_in_app_timezone()) == []
    finally:
        fresh.close()
