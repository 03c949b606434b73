"""Integration tests for the notification inbox endpoints."""

from agrilink.application.use_cases.notifications import create_notification


def _seed(db_session, user_id, count):
    for index in range(count):
        create_notification(
            db_session,
            user_id=user_id,
            type="order_update",
            title=f"Order {index}",
            message="Your order was shipped",
            link=f"/orders/{index}",
        )


def test_inbox_requires_authentication(client):
    assert client.get("/notifications/").status_code == 401


def test_list_and_mark_read(client, db_session, make_user, headers_for):
    user = make_user()
    other = make_user()
    _seed(db_session, user.id, 3)
    _seed(db_session, other.id, 1)

    body = client.get("/notifications/", headers=headers_for(user)).json()
    assert body["unreadCount"] == 3
    assert len(body["notifications"]) == 3
    assert body["notifications"][0]["type"] == "order_update"
    first_id = body["notifications"][0]["id"]

    marked = client.put(
        "/notifications/read",
        json={"ids": [first_id, first_id]},
        headers=headers_for(user),
    )
    assert marked.json() == {"updated": 1}

    unread = client.get("/notifications/?unread=true", headers=headers_for(user)).json()
    assert len(unread["notifications"]) == 2
    assert first_id not in [n["id"] for n in unread["notifications"]]

    marked_all = client.put("/notifications/read", headers=headers_for(user))
    assert marked_all.json() == {"updated": 2}

    other_body = client.get("/notifications/", headers=headers_for(other)).json()
    assert other_body["unreadCount"] == 1


def test_limit_is_applied(client, db_session, make_user, headers_for):
    user = make_user()
    _seed(db_session, user.id, 5)

    body = client.get("/notifications/?limit=2", headers=headers_for(user)).json()

    assert len(body["notifications"]) == 2
    assert body["unreadCount"] == 5
