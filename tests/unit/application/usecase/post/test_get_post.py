"""Unit tests for GetPostUseCase."""

from uuid import uuid4

import pytest

from chirp.application.usecase.post import GetPostRequest, GetPostUseCase
from chirp.domain.error import NotFoundError, ValidationError
from chirp.domain.repository import PostRepository
from tests.conftest import make_caller, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetPostUseCase:
    """Unit tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_get_public_post(self, unit_env):
        """Any caller can read a public post."""
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_caller("alice")))

        # Act
        result = await use_case.execute(
            GetPostRequest(caller=make_caller("bob"), post_id=str(post.id))
        )

        # Assert
        assert result.id == str(post.id)
        assert result.liked_by_me is False

    @pytest.mark.asyncio
    async def test_private_post_hidden_from_other_users(self, unit_env):
        """Should not reveal another user's private post."""
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_caller("alice"), is_public=False))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetPostRequest(caller=make_caller("bob"), post_id=str(post.id))
            )

    @pytest.mark.asyncio
    async def test_private_post_visible_to_author(self, unit_env):
        """The author can read their own private post."""
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        post_repo = await unit_env.get(PostRepository)
        alice = make_caller("alice")
        post = await post_repo.save(make_post(alice, is_public=False))

        # Act
        result = await use_case.execute(
            GetPostRequest(caller=alice, post_id=str(post.id))
        )

        # Assert
        assert result.is_public is False

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        """Should raise NotFoundError for a well-formed but unknown id."""
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetPostRequest(caller=make_caller(), post_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_malformed_id(self, unit_env):
        """Should raise ValidationError for an id that isn't a UUID."""
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                GetPostRequest(caller=make_caller(), post_id="not-a-uuid")
            )
