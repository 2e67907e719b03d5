"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from chirp.domain.error import NotFoundError
from chirp.domain.model import User
from chirp.domain.model.common import utcnow
from chirp.domain.service import UserService
from chirp.domain.value import Email, UserId, Username
from chirp.persistence.repository.inmemory import InMemoryUserRepository


def _user(username: str, email: str) -> User:
    now = utcnow()
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=Email(email),
        password_hash="$2b$04$notarealhash",
        created_at=now,
        updated_at=now,
    )


class TestGetById:
    """Tests for UserService.get_by_id()."""

    @pytest.mark.asyncio
    async def test_existing_user(self):
        """Should return the stored user."""
        # Arrange
        repo = InMemoryUserRepository()
        service = UserService(repo)
        user = await repo.save(_user("alice", "alice@example.com"))

        # Act
        found = await service.get_by_id(user.id)

        # Assert
        assert found.username == Username("alice")

    @pytest.mark.asyncio
    async def test_missing_user(self):
        """Should raise NotFoundError for an unknown id."""
        service = UserService(InMemoryUserRepository())

        with pytest.raises(NotFoundError):
            await service.get_by_id(UserId(uuid4()))


class TestLookups:
    """Tests for lookups by username and email."""

    @pytest.mark.asyncio
    async def test_lookup_by_username_and_email(self):
        """Should find users by their unique fields."""
        # Arrange
        repo = InMemoryUserRepository()
        service = UserService(repo)
        user = await repo.save(_user("alice", "alice@example.com"))

        # Act
        by_username = await service.get_user_by_username(Username("alice"))
        by_email = await service.get_user_by_email(Email("ALICE@example.com"))
        missing = await service.get_user_by_username(Username("bob"))

        # Assert
        assert by_username.id == user.id
        assert by_email.id == user.id
        assert missing is None

    @pytest.mark.asyncio
    async def test_username_is_case_sensitive(self):
        """Should treat usernames differing only in case as distinct."""
        repo = InMemoryUserRepository()
        service = UserService(repo)
        await repo.save(_user("alice", "alice@example.com"))

        assert await service.get_user_by_username(Username("Alice")) is None
