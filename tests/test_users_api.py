from __future__ import annotations

from datetime import datetime

import pytest

from .factories import TEST_PASSWORD, random_username


def _user_body(username: str | None = None, **overrides) -> dict:
    username = username or random_username()
    body = {
        "username": username,
        "password": TEST_PASSWORD,
        "full_name": f"{username} tester",
        "email": f"{username}@example.com",
    }
    body.update(overrides)
    return body


async def test_create_user(client):
    body = _user_body()

    response = await client.post("/users", json=body)

    assert response.status_code == 200
    data = response.json()
    assert data["username"] == body["username"]
    assert data["full_name"] == body["full_name"]
    assert data["email"] == body["email"]
    assert "password" not in data
    assert "hashed_password" not in data
    assert data["created_at"]
    assert data["password_changed_at"]


async def test_duplicate_username_is_forbidden(client):
    body = _user_body()
    assert (await client.post("/users", json=body)).status_code == 200

    response = await client.post("/users", json=_user_body(body["username"], email="second@example.com"))

    assert response.status_code == 403
    assert response.json() == {"error": f"username {body['username']} already exists"}


async def test_duplicate_email_is_forbidden(client):
    body = _user_body()
    assert (await client.post("/users", json=body)).status_code == 200

    response = await client.post("/users", json=_user_body(email=body["email"]))

    assert response.status_code == 403


@pytest.mark.parametrize(
    "overrides",
    [
        {"password": "12345"},
        {"username": "bad user!"},
        {"email": "not-an-email"},
        {"full_name": ""},
    ],
)
async def test_invalid_user_is_rejected(client, overrides):
    response = await client.post("/users", json=_user_body(**overrides))

    assert response.status_code == 400
    assert "error" in response.json()


async def test_login(client, app):
    body = _user_body()
    await client.post("/users", json=body)

    response = await client.post(
        "/users/login", json={"username": body["username"], "password": body["password"]}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["user"]["username"] == body["username"]
    assert "hashed_password" not in data["user"]
    payload = app.state.container.token_maker.verify_token(data["access_token"])
    assert payload.username == body["username"]
    assert datetime.fromisoformat(data["access_token_expires_at"]) == payload.expired_at


async def test_login_with_wrong_password(client):
    body = _user_body()
    await client.post("/users", json=body)

    response = await client.post("/users/login", json={"username": body["username"], "password": "wrongpass"})

    assert response.status_code == 401
    assert response.json() == {"error": "incorrect password"}


async def test_login_with_unknown_user(client):
    response = await client.post("/users/login", json={"username": "nobody", "password": TEST_PASSWORD})

    assert response.status_code == 404


async def test_login_validates_input(client):
    response = await client.post("/users/login", json={"username": "someone", "password": "123"})

    assert response.status_code == 400
