"""Integration tests for the messaging endpoints."""

from sqlalchemy.exc import OperationalError

from agrilink.domain.entities import UserRole
from agrilink.infrastructure.repositories import UserRepository
from agrilink.infrastructure.security import create_access_token


def test_unread_count_for_anonymous_caller(client):
    response = client.get("/messages/unread")

    assert response.status_code == 200
    assert response.json() == {"unreadCount": 0}


def test_unread_count_with_invalid_token_is_zero(client):
    response = client.get(
        "/messages/unread", headers={"Authorization": "Bearer not-a-token"}
    )

    assert response.status_code == 200
    assert response.json() == {"unreadCount": 0}


def test_unread_count_with_unknown_subject_is_zero(client):
    token = create_access_token({"sub": "424242"})

    response = client.get("/messages/unread", headers={"Authorization": f"Bearer {token}"})

    assert response.json() == {"unreadCount": 0}


def test_unread_count_when_user_lookup_fails_is_zero(client, make_user, headers_for, monkeypatch):
    headers = headers_for(make_user())

    def explode(self, user_id):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr(UserRepository, "get", explode)

    response = client.get("/messages/unread", headers=headers)

    assert response.status_code == 200
    assert response.json() == {"unreadCount": 0}


def test_send_read_and_count_flow(client, make_user, headers_for):
    customer = make_user()
    farmer = make_user(UserRole.FARMER)

    assert client.get("/messages/unread", headers=headers_for(farmer)).json() == {
        "unreadCount": 0
    }

    created = client.post(
        "/messages/",
        json={"receiverId": farmer.id, "content": "Do you have tomatoes?"},
        headers=headers_for(customer),
    )
    assert created.status_code == 201
    assert created.json()["isRead"] is False

    assert client.get("/messages/unread", headers=headers_for(farmer)).json() == {
        "unreadCount": 1
    }

    conversations = client.get("/messages/", headers=headers_for(farmer)).json()
    assert conversations["conversations"][0]["user"]["id"] == customer.id
    assert conversations["conversations"][0]["unreadCount"] == 1

    thread = client.get(f"/messages/{customer.id}", headers=headers_for(farmer))
    assert thread.status_code == 200
    assert [m["content"] for m in thread.json()["messages"]] == ["Do you have tomatoes?"]

    assert client.get("/messages/unread", headers=headers_for(farmer)).json() == {
        "unreadCount": 0
    }


def test_send_requires_authentication(client):
    response = client.post("/messages/", json={"receiverId": 1, "content": "hi"})

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_send_between_customers_is_forbidden(client, make_user, headers_for):
    sender = make_user()
    receiver = make_user()

    response = client.post(
        "/messages/",
        json={"receiverId": receiver.id, "content": "hi"},
        headers=headers_for(sender),
    )

    assert response.status_code == 403


def test_send_to_missing_user(client, make_user, headers_for):
    farmer = make_user(UserRole.FARMER)

    response = client.post(
        "/messages/",
        json={"receiver_id": 999, "content": "hi"},
        headers=headers_for(farmer),
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Recipient not found"}


def test_thread_by_user_id_query_marks_messages_read(client, make_user, headers_for):
    customer = make_user()
    farmer = make_user(UserRole.FARMER)
    client.post(
        "/messages/",
        json={"receiverId": farmer.id, "content": "Are the mangoes ripe?"},
        headers=headers_for(customer),
    )

    response = client.get(
        "/messages/", params={"user_id": customer.id}, headers=headers_for(farmer)
    )

    assert response.status_code == 200
    body = response.json()
    assert "conversations" not in body
    assert [m["content"] for m in body["messages"]] == ["Are the mangoes ripe?"]
    assert client.get("/messages/unread", headers=headers_for(farmer)).json() == {
        "unreadCount": 0
    }
