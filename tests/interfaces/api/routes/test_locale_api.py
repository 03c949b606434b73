"""Integration tests for the locale endpoints."""


def test_default_locale_without_cookie(client):
    body = client.get("/locale/").json()

    assert body["locale"] == "en"
    assert body["messages"]["nav"]["home"] == "Home"


def test_cookie_selects_locale(client):
    client.cookies.set("NEXT_LOCALE", "ta")

    body = client.get("/locale/").json()

    assert body["locale"] == "ta"
    assert body["messages"]["settings"]["language"] == "மொழி"


def test_unsupported_cookie_falls_back(client):
    client.cookies.set("NEXT_LOCALE", "fr")

    assert client.get("/locale/").json()["locale"] == "en"


def test_available_locales(client):
    body = client.get("/locale/available").json()

    assert [option["code"] for option in body] == ["en", "hi", "ta"]
    assert body[1]["name"] == "हिंदी"


def test_update_sets_cookie(client):
    response = client.put("/locale/", json={"locale": "hi"})

    assert response.status_code == 200
    assert response.json() == {"locale": "hi", "reload": True}
    set_cookie = response.headers["set-cookie"]
    assert "NEXT_LOCALE=hi" in set_cookie
    assert "Max-Age=31536000" in set_cookie
    assert "Path=/" in set_cookie
    assert "SameSite=lax" in set_cookie


def test_update_rejects_unknown_locale(client):
    assert client.put("/locale/", json={"locale": "fr"}).status_code == 422
