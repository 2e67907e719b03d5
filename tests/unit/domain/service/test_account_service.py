"""Unit tests for AccountService."""

import threading

import pytest

from chirp.config import AuthSettings
from chirp.domain.error import ConflictError, InvalidCredentialsError, ValidationError
from chirp.domain.service import AccountService, UserService
from chirp.domain.service import account_service as account_service_module
from chirp.persistence.repository.inmemory import InMemoryUserRepository


@pytest.fixture
def account_service():
    user_service = UserService(InMemoryUserRepository())
    return AccountService(user_service, AuthSettings(bcrypt_rounds=4))


class TestRegister:
    """Tests for AccountService.register()."""

    @pytest.mark.asyncio
    async def test_register_stores_hashed_password(self, account_service):
        """Should create the user with a bcrypt hash, never the password."""
        # Act
        user = await account_service.register("alice", "Alice@Example.com", "secret1")

        # Assert
        assert user.username.root == "alice"
        assert user.email.root == "alice@example.com"
        assert user.password_hash != "secret1"
        assert user.created_at == user.updated_at

    @pytest.mark.asyncio
    async def test_duplicate_email(self, account_service):
        """Should reject an email that is already registered, ignoring case."""
        # Arrange
        await account_service.register("alice", "alice@example.com", "secret1")

        # Act & Assert
        with pytest.raises(ConflictError) as exc_info:
            await account_service.register("alice2", "ALICE@example.com", "secret1")
        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_duplicate_username(self, account_service):
        """Should reject a username that is already taken."""
        # Arrange
        await account_service.register("alice", "alice@example.com", "secret1")

        # Act & Assert
        with pytest.raises(ConflictError) as exc_info:
            await account_service.register("alice", "other@example.com", "secret1")
        assert exc_info.value.field == "username"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,email,password",
        [
            ("al", "alice@example.com", "secret1"),
            ("alice smith", "alice@example.com", "secret1"),
            ("alice", "not-an-email", "secret1"),
            ("alice", "alice@example.com", "short"),
            ("alice", "alice@example.com", "p" * 73),
        ],
    )
    async def test_invalid_fields(self, account_service, username, email, password):
        """Should reject malformed usernames, emails and passwords."""
        with pytest.raises(ValidationError):
            await account_service.register(username, email, password)


class TestAuthenticate:
    """Tests for AccountService.authenticate()."""

    @pytest.mark.asyncio
    async def test_correct_password(self, account_service):
        """Should return the user for matching credentials."""
        # Arrange
        registered = await account_service.register(
            "alice", "alice@example.com", "secret1"
        )

        # Act
        user = await account_service.authenticate("ALICE@example.com", "secret1")

        # Assert
        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(
        self, account_service
    ):
        """Should raise the same error for both failure modes."""
        # Arrange
        await account_service.register("alice", "alice@example.com", "secret1")

        # Act
        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await account_service.authenticate("alice@example.com", "wrong-password")
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await account_service.authenticate("nobody@example.com", "secret1")

        # Assert
        assert str(wrong_password.value) == str(unknown_email.value)
        assert str(wrong_password.value) == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_malformed_email(self, account_service):
        """Should treat a malformed email as invalid credentials."""
        with pytest.raises(InvalidCredentialsError):
            await account_service.authenticate("nope", "secret1")


class TestHashingOffTheEventLoop:
    """bcrypt work must run in a worker thread, not on the event loop."""

    @pytest.mark.asyncio
    async def test_register_hashes_in_worker_thread(
        self, account_service, monkeypatch
    ):
        """Should hash the password outside the event loop thread."""
        # Arrange
        loop_thread = threading.get_ident()
        seen_threads = []
        real_hash = account_service_module.hash_password

        def recording_hash(password, rounds):
            seen_threads.append(threading.get_ident())
            return real_hash(password, rounds)

        monkeypatch.setattr(account_service_module, "hash_password", recording_hash)

        # Act
        await account_service.register("alice", "alice@example.com", "secret1")

        # Assert
        assert len(seen_threads) == 1
        assert seen_threads[0] != loop_thread

    @pytest.mark.asyncio
    async def test_authenticate_verifies_in_worker_thread(
        self, account_service, monkeypatch
    ):
        """Should verify the password outside the event loop thread."""
        # Arrange
        await account_service.register("alice", "alice@example.com", "secret1")
        loop_thread = threading.get_ident()
        seen_threads = []
        real_verify = account_service_module.verify_password

        def recording_verify(password, hashed):
            seen_threads.append(threading.get_ident())
            return real_verify(password, hashed)

        monkeypatch.setattr(
            account_service_module, "verify_password", recording_verify
        )

        # Act
        await account_service.authenticate("alice@example.com", "secret1")

        # Assert
        assert len(seen_threads) == 1
        assert seen_threads[0] != loop_thread
