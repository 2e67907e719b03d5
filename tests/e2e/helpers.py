"""Shared helpers for end-to-end tests."""

from fastapi.testclient import TestClient

from chirp.config import RateLimitSettings, Settings
from chirp.interface.api.app import create_app
from tests.di.container import build_test_container


def make_client(settings: Settings | None = None) -> TestClient:
    """Test client for an app backed by in-memory persistence.

    Rate limiting is off unless ``settings`` turns it on. Cookies set by one
    response are sent on the next request.
    """
    settings = settings or Settings(rate_limit=RateLimitSettings(enabled=False))
    app_instance = create_app(
        container=build_test_container(settings=settings), settings=settings
    )
    return TestClient(app_instance)


def register(
    client: TestClient,
    username: str,
    email: str | None = None,
    password: str = "secret123",
) -> dict:
    """Register an account and return the response body (token and user)."""
    response = client.post(
        "/auth/register",
        json={
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token: str) -> dict[str, str]:
    """Authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}
