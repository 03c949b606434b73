"""Tests for the best-effort notification writer."""

import logging

from sqlalchemy.exc import OperationalError

from agrilink.application.use_cases.notifications import (
    create_notification,
    list_notifications,
    mark_notifications_read,
)
from agrilink.domain.entities import NotificationType
from agrilink.infrastructure.repositories import NotificationRepository


def test_notification_is_persisted(db_session, make_user):
    user = make_user()

    create_notification(
        db_session,
        user_id=user.id,
        type=NotificationType.NEW_FOLLOWER,
        title="New follower",
        message="Priya started following you",
        link="/farmers/1",
    )

    notifications, unread = list_notifications(db_session, user.id)
    assert unread == 1
    assert [n.type for n in notifications] == [NotificationType.NEW_FOLLOWER]
    assert notifications[0].link == "/farmers/1"
    assert notifications[0].is_read is False


def test_failed_write_is_logged_and_swallowed(db_session, make_user, monkeypatch, caplog):
    user = make_user()

    def explode(self, notification):
        raise OperationalError("INSERT", {}, Exception("disk full"))

    monkeypatch.setattr(NotificationRepository, "create", explode)

    with caplog.at_level(logging.ERROR):
        result = create_notification(
            db_session,
            user_id=user.id,
            type="system",
            title="Hello",
            message="World",
        )

    assert result is None
    assert "Failed to create notification" in caplog.text


def test_invalid_type_never_raises(db_session, make_user):
    user = make_user()

    create_notification(
        db_session, user_id=user.id, type="carrier_pigeon", title="t", message="m"
    )

    assert list_notifications(db_session, user.id)[1] == 0


def test_mark_selected_and_all_read(db_session, make_user):
    user = make_user()
    for index in range(3):
        create_notification(
            db_session, user_id=user.id, type="system", title=f"n{index}", message="m"
        )
    notifications, _ = list_notifications(db_session, user.id)

    assert mark_notifications_read(db_session, user.id, [notifications[0].id]) == 1
    assert list_notifications(db_session, user.id)[1] == 2
    assert mark_notifications_read(db_session, user.id) == 2
    assert list_notifications(db_session, user.id, unread_only=True)[0] == []
