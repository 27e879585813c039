"""
Tests for user registration, /me and login.
"""

import pytest
from fastapi.testclient import TestClient

from vidly.core.security import decode_access_token
from vidly.main import create_app


class TestUsers:
    @pytest.fixture
    def credentials(self):
        return {"name": "Jane Doe", "email": "jane@example.com", "password": "secret123"}

    @pytest.fixture
    def registered(self, client, credentials):
        return client.post("/api/users", json=credentials)

    def test_register_returns_user_and_token_header(self, registered, settings):
        assert registered.status_code == 200
        body = registered.json()
        assert body["email"] == "jane@example.com"
        assert body["isAdmin"] is False
        assert "password" not in body
        assert "passwordHash" not in body

        identity = decode_access_token(registered.headers["x-auth-token"], settings)
        assert identity.id == body["_id"]

    def test_register_twice_returns_400(self, client, registered, credentials):
        response = client.post("/api/users", json=credentials)

        assert response.status_code == 400
        assert response.json()["detail"] == "User already registered."

    def test_register_with_invalid_email_returns_400(self, client, credentials):
        credentials["email"] = "not-an-email"

        assert client.post("/api/users", json=credentials).status_code == 400

    def test_me_returns_current_user(self, client, registered):
        token = registered.headers["x-auth-token"]

        response = client.get("/api/users/me", headers={"x-auth-token": token})

        assert response.status_code == 200
        assert response.json()["_id"] == registered.json()["_id"]

    def test_me_requires_login(self, client):
        assert client.get("/api/users/me").status_code == 401

    def test_login_returns_token(self, client, registered, credentials, settings):
        response = client.post(
            "/api/auth",
            json={"email": credentials["email"], "password": credentials["password"]},
        )

        assert response.status_code == 200
        identity = decode_access_token(response.json(), settings)
        assert identity.id == registered.json()["_id"]

    def test_login_with_wrong_password_returns_400(self, client, registered, credentials):
        response = client.post(
            "/api/auth",
            json={"email": credentials["email"], "password": "wrong-password"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid email or password."

    def test_login_with_unknown_email_returns_400(self, client):
        response = client.post(
            "/api/auth",
            json={"email": "nobody@example.com", "password": "whatever"},
        )

        assert response.status_code == 400

    def test_me_without_login_returns_401_when_auth_is_off(self, settings):
        settings.REQUIRE_AUTH = False
        with TestClient(create_app(settings)) as client:
            response = client.get("/api/users/me")

        assert response.status_code == 401
        assert response.json()["detail"] == "Access denied. No token provided."
