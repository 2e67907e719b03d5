"""Unit tests for RegisterUseCase."""

import pytest

from chirp.application.usecase.auth import RegisterRequest, RegisterUseCase
from chirp.domain.error import ConflictError, ValidationError
from chirp.domain.repository import UserRepository
from chirp.domain.service import JWTService
from chirp.domain.value import Email
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Unit tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_token_and_account(self, unit_env):
        """Should store the user and issue a token that identifies them."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        jwt_service = await unit_env.get(JWTService)
        user_repo = await unit_env.get(UserRepository)

        # Act
        result = await use_case.execute(
            RegisterRequest(
                username="alice", email="Alice@Example.com", password="secret1"
            )
        )

        # Assert
        assert result.user.username == "alice"
        assert result.user.email == "alice@example.com"
        assert "password" not in result.user.model_dump_json()

        payload = jwt_service.verify_token(result.token)
        assert payload.user_id == result.user.id
        assert payload.username == "alice"

        stored = await user_repo.find_by_email(Email("alice@example.com"))
        assert stored is not None
        assert stored.password_hash != "secret1"

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, unit_env):
        """Should raise ConflictError for a taken email."""
        # Arrange
        use_case = await unit_env.get(RegisterUseCase)
        await use_case.execute(
            RegisterRequest(username="alice", email="a@example.com", password="secret1")
        )

        # Act & Assert
        with pytest.raises(ConflictError, match="email"):
            await use_case.execute(
                RegisterRequest(
                    username="other", email="a@example.com", password="secret1"
                )
            )

    @pytest.mark.asyncio
    async def test_register_short_password(self, unit_env):
        """Should raise ValidationError for a password under six characters."""
        use_case = await unit_env.get(RegisterUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                RegisterRequest(
                    username="alice", email="a@example.com", password="12345"
                )
            )
