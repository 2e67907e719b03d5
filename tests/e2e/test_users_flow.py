"""End-to-end tests for user profile endpoints."""

from uuid import uuid4

import pytest

from tests.e2e.helpers import bearer, make_client, register


@pytest.fixture
def client():
    """Create test client with test container."""
    return make_client()


class TestUserProfileEndpoints:
    """End-to-end tests for user profile API endpoints.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_get_profile(self, client):
        alice = register(client, "alice")
        bob = register(client, "bob")

        response = client.get(
            f"/users/{alice['user']['id']}", headers=bearer(bob["token"])
        )

        assert response.status_code == 200
        assert response.json()["username"] == "alice"
        assert "email" not in response.json()

    def test_get_nonexistent_user_profile(self, client):
        alice = register(client, "alice")

        response = client.get(f"/users/{uuid4()}", headers=bearer(alice["token"]))

        assert response.status_code == 404

    def test_profile_requires_auth(self, client):
        response = client.get(f"/users/{uuid4()}")

        assert response.status_code == 401

    def test_unknown_user_has_empty_feed(self, client):
        alice = register(client, "alice")

        response = client.get(
            f"/users/{uuid4()}/posts", headers=bearer(alice["token"])
        )

        assert response.status_code == 200
        assert response.json()["posts"] == []
