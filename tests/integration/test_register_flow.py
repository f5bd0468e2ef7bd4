"""
Integration tests for registration flow.

Tests the full flow through the real application: lifespan, settings,
simulated lookup, domain pipeline and error log.
"""

import logging
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.api.main import app


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create test client; entering it runs the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client


class TestRegisterFlow:
    """Integration tests for POST /v1/register."""

    def test_full_registration_flow(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Valid input is normalized, checked remotely and accepted."""
        with caplog.at_level(logging.INFO):
            response = client.post(
                "/v1/register",
                json={"email": "Test@Example.COM", "password": "SecurePass123", "age": 30},
            )

        assert response.status_code == 201
        assert response.json() == {
            "message": "Registration accepted",
            "email": "test@example.com",
            "age": 30,
        }
        assert "[REGISTER] Accepted: test@example.com" in caplog.text

    def test_first_error_wins(self, client: TestClient) -> None:
        """With every field invalid, only the email error is reported."""
        response = client.post(
            "/v1/register",
            json={"email": "bademail", "password": "short", "age": 5},
        )

        assert response.status_code == 422
        assert response.json() == {
            "detail": "Email validation failed: Missing @ symbol",
            "kind": "email",
        }

    def test_password_rules(self, client: TestClient) -> None:
        """Password strength failures are reported by rule."""
        response = client.post(
            "/v1/register",
            json={"email": "a@b.com", "password": "Password", "age": 30},
        )

        assert response.status_code == 422
        assert response.json()["detail"] == "Password validation failed: Missing number"

    def test_duplicate_email(self, client: TestClient) -> None:
        """An email the lookup knows is rejected with 409."""
        response = client.post(
            "/v1/register",
            json={"email": "existing@example.com", "password": "SecurePass123", "age": 30},
        )

        assert response.status_code == 409
        assert response.json() == {
            "detail": "Email already registered: existing@example.com",
            "kind": "duplicate_email",
        }

    def test_failures_appear_in_error_log(self, client: TestClient) -> None:
        """Failed registrations are listed by /v1/errors in order."""
        client.post("/v1/register", json={"email": "x", "password": "SecurePass123", "age": 30})
        client.post("/v1/register", json={"email": "a@b.com", "password": "SecurePass123", "age": 500})
        client.post(
            "/v1/register", json={"email": "a@b.com", "password": "SecurePass123", "age": 30}
        )

        entries = client.get("/v1/errors").json()

        assert [entry["kind"] for entry in entries] == ["email", "age"]
        assert entries[1]["detail"] == "Age validation failed: Invalid age"

    def test_error_log_fresh_per_run(self, client: TestClient) -> None:
        """Each application run starts with an empty error log."""
        assert client.get("/v1/errors").json() == []


class TestValidateFlow:
    """Integration tests for POST /v1/validate."""

    def test_collects_all_issues(self, client: TestClient) -> None:
        """Collect-all validation lists every invalid field."""
        response = client.post(
            "/v1/validate",
            json={"email": "a@nodomain", "password": "lowercase1", "age": 130},
        )

        assert response.status_code == 422
        assert response.json()["issues"] == [
            {"field": "email", "message": "Missing domain"},
            {"field": "password", "message": "Missing uppercase"},
            {"field": "age", "message": "Invalid age"},
        ]

    def test_validate_does_not_record_errors(self, client: TestClient) -> None:
        """Validation issues are reported, not logged."""
        client.post("/v1/validate", json={"email": "bad", "password": "short", "age": 5})
        assert client.get("/v1/errors").json() == []


class TestHealth:
    """Integration tests for GET /health."""

    def test_health(self, client: TestClient) -> None:
        """Health endpoint reports healthy."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
