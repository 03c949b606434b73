"""Integration tests for the profile endpoints."""

from agrilink.application.state import UserSnapshot, UserStore
from agrilink.domain.entities import User


def test_read_profile(client, make_user, headers_for):
    user = make_user(full_name="Priya Sharma")

    response = client.get("/users/me", headers=headers_for(user))

    assert response.status_code == 200
    body = response.json()
    assert body["fullName"] == "Priya Sharma"
    assert body["role"] == "customer"


def test_partial_profile_update_feeds_user_store(client, make_user, headers_for):
    user = make_user(full_name="Priya Sharma", phone="9123456789")
    store = UserStore()
    store.set_user(UserSnapshot.from_user(user))

    response = client.patch(
        "/users/me",
        json={"fullName": "Priya S.", "language": "ta"},
        headers=headers_for(user),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["fullName"] == "Priya S."
    assert body["phone"] == "9123456789"
    assert body["language"] == "ta"

    store.update_user(full_name=body["fullName"])
    assert store.user.full_name == "Priya S."
    assert store.user.phone == "9123456789"


def test_invalid_language_is_rejected(client, make_user, headers_for):
    user: User = make_user()

    response = client.patch(
        "/users/me", json={"language": "fr"}, headers=headers_for(user)
    )

    assert response.status_code == 422


def test_profile_image_can_be_cleared(client, make_user, headers_for):
    user = make_user(full_name="Priya Sharma")
    headers = headers_for(user)
    client.patch(
        "/users/me", json={"profileImage": "https://img.example/p.png"}, headers=headers
    )

    kept = client.patch("/users/me", json={"phone": "9000000000"}, headers=headers)
    assert kept.json()["profileImage"] == "https://img.example/p.png"

    cleared = client.patch("/users/me", json={"profileImage": None}, headers=headers)

    assert cleared.status_code == 200
    assert cleared.json()["profileImage"] is None
    assert cleared.json()["fullName"] == "Priya Sharma"
