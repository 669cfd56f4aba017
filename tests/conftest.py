"""Shared fixtures: a fresh app and SQLite file per test."""

from __future__ import annotations

import pytest

from expense_backend import create_app


@pytest.fixture
def app(tmp_path):
    app = create_app(
        {
            "TESTING": True,
            "DATABASE": str(tmp_path / "expense.db"),
            "JWT_SECRET_KEY": "test-secret-key-for-expense-backend-tests-0123456789",
        }
    )
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, username: str = "alice", password: str = "s3cret") -> dict:
    """Register ``username`` and return bearer headers for it."""
    client.post(
        "/auth/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "password": password,
            "confirm_password": password,
        },
    )
    resp = client.post("/auth/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.get_json()
    return {"Authorization": f"Bearer {resp.get_json()['access_token']}"}


@pytest.fixture
def auth_headers(client) -> dict:
    return login(client)
