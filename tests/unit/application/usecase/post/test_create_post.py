"""Unit tests for CreatePostUseCase."""

import pytest

from chirp.application.usecase.post import CreatePostRequest, CreatePostUseCase
from chirp.domain.error import ValidationError
from chirp.domain.repository import PostRepository
from tests.conftest import make_caller
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreatePostUseCase:
    """Unit tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_post_success(self, unit_env):
        """Should store a trimmed post owned by the caller."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        caller = make_caller("alice")

        # Act
        result = await use_case.execute(
            CreatePostRequest(caller=caller, content="  Hello world  ")
        )

        # Assert
        assert result.content == "Hello world"
        assert result.author_id == str(caller.user_id)
        assert result.author_username == "alice"
        assert result.is_public is True
        assert result.likes == []
        assert result.comments == []
        assert result.created_at == result.updated_at
        assert await post_repo.count(public_only=True) == 1

    @pytest.mark.asyncio
    async def test_create_private_post(self, unit_env):
        """Should keep a private post out of the public count."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)

        # Act
        result = await use_case.execute(
            CreatePostRequest(caller=make_caller(), content="secret", is_public=False)
        )

        # Assert
        assert result.is_public is False
        assert await post_repo.count(public_only=True) == 0
        assert await post_repo.count(public_only=False) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "    ", "x" * 5001])
    async def test_create_post_invalid_content(self, unit_env, content):
        """Should reject blank or overlong content without storing anything."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreatePostRequest(caller=make_caller(), content=content)
            )
        assert await post_repo.count(public_only=False) == 0
