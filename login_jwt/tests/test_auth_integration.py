from __future__ import annotations

import pytest
from flask import Flask
from jose import jwt

from login_jwt.app import create_app
from login_jwt.infrastructure.db import SessionLocal
from login_jwt.infrastructure.db.models import User

ALICE = {"username": "alice", "email": "a@x.com", "password": "p@ss1"}


@pytest.fixture()
def app(database) -> Flask:
    return create_app()


def test_register_login_me_flow(app: Flask) -> None:
    with app.test_client() as client:
        register = client.post("/register", json=ALICE)
        assert register.status_code == 200
        body = register.get_json()
        assert body == {"id": body["id"], "username": "alice", "email": "a@x.com"}
        assert "p@ss1" not in register.get_data(as_text=True)
        assert "password" not in register.get_data(as_text=True)

        login = client.post(
            "/login", json={"username_or_email": "alice", "password": "p@ss1"}
        )
        assert login.status_code == 200
        token = login.get_json()["token"]
        assert token

        claims = jwt.get_unverified_claims(token)
        assert claims["user_id"] == body["id"]
        assert claims["exp"] - claims["iat"] == 24 * 60 * 60

        me = client.get("/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.get_json() == body

    session = SessionLocal()
    try:
        row = session.query(User).one()
        assert row.password_hash != "p@ss1"
        assert row.password_hash.startswith("pbkdf2:sha256")
    finally:
        session.close()


def test_login_by_email(app: Flask) -> None:
    with app.test_client() as client:
        client.post("/register", json=ALICE)
        login = client.post(
            "/login", json={"username_or_email": "a@x.com", "password": "p@ss1"}
        )

    assert login.status_code == 200
    assert login.get_json()["token"]


@pytest.mark.parametrize(
    "duplicate",
    [
        {"username": "alice", "email": "other@x.com", "password": "x"},
        {"username": "bob", "email": "a@x.com", "password": "x"},
    ],
)
def test_duplicate_registration_returns_409(app: Flask, duplicate: dict) -> None:
    with app.test_client() as client:
        first = client.post("/register", json=ALICE)
        second = client.post("/register", json=duplicate)

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.get_json()["error"] == "user_already_exists"


def test_wrong_password_and_unknown_user_are_indistinguishable(app: Flask) -> None:
    with app.test_client() as client:
        client.post("/register", json=ALICE)
        wrong_password = client.post(
            "/login", json={"username_or_email": "alice", "password": "wrong"}
        )
        unknown_user = client.post(
            "/login", json={"username_or_email": "nobody", "password": "p@ss1"}
        )

    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.get_json() == unknown_user.get_json()
    assert wrong_password.get_json()["message"] == "Invalid credentials"


def test_me_rejects_tampered_token(app: Flask) -> None:
    with app.test_client() as client:
        client.post("/register", json=ALICE)
        token = client.post(
            "/login", json={"username_or_email": "alice", "password": "p@ss1"}
        ).get_json()["token"]
        forged = jwt.encode({"user_id": 1, "iat": 0, "exp": 9999999999}, "other-secret")

        tampered = client.get("/me", headers={"Authorization": f"Bearer {forged}"})
        missing = client.get("/me")
        valid = client.get("/me", headers={"Authorization": f"Bearer {token}"})

    assert tampered.status_code == 401
    assert missing.status_code == 401
    assert tampered.get_json() == missing.get_json()
    assert valid.status_code == 200


def test_cors_preflight_allows_any_origin(app: Flask) -> None:
    with app.test_client() as client:
        response = client.options(
            "/login",
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert "POST" in response.headers["Access-Control-Allow-Methods"]


def test_cors_simple_request_sends_literal_wildcard(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/health", headers={"Origin": "http://other.example"})

    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_health_reports_database(app: Flask) -> None:
    with app.test_client() as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}
