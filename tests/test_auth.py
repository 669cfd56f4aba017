"""Tests for registration, login and the identity check on protected routes."""

from __future__ import annotations

from conftest import login


def _register(client, **overrides):
    payload = {
        "username": "carol",
        "email": "carol@example.com",
        "password": "pw",
        "confirm_password": "pw",
    }
    payload.update(overrides)
    return client.post("/auth/register", json=payload)


def test_register_and_login(client) -> None:
    resp = _register(client)
    assert resp.status_code == 201

    resp = client.post("/auth/login", json={"username": "carol", "password": "pw"})
    assert resp.status_code == 200
    assert resp.get_json()["access_token"]


def test_register_password_mismatch(client) -> None:
    resp = _register(client, confirm_password="other")
    assert resp.status_code == 400
    assert resp.get_json()["msg"] == "Passwords do not match."


def test_register_duplicate_email(client) -> None:
    assert _register(client).status_code == 201
    resp = _register(client, username="carol2")
    assert resp.status_code == 400
    assert "Email already registered" in resp.get_json()["msg"]


def test_login_wrong_password(client) -> None:
    _register(client)
    resp = client.post("/auth/login", json={"username": "carol", "password": "nope"})
    assert resp.status_code == 401


def test_protected_routes_need_token(client) -> None:
    for path in ["/expenses", "/savings", "/reports/today", "/reports/monthly", "/auth/profile"]:
        resp = client.get(path)
        assert resp.status_code == 401, path

    resp = client.get("/expenses", headers={"Authorization": "Bearer not-a-token"})
    assert resp.status_code == 401


def test_profile(client) -> None:
    headers = login(client, "dave")
    resp = client.get("/auth/profile", headers=headers)
    assert resp.get_json() == {"username": "dave", "email": "dave@example.com"}
