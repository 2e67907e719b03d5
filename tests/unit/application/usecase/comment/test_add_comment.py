"""Unit tests for AddCommentUseCase."""

from uuid import uuid4

import pytest

from chirp.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from chirp.domain.error import NotFoundError, ValidationError
from chirp.domain.repository import PostRepository
from tests.conftest import make_caller, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAddCommentUseCase:
    """Unit tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_add_comment_success(self, unit_env):
        """Should append a trimmed comment attributed to the caller."""
        # Arrange
        use_case = await unit_env.get(AddCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        bob = make_caller("bob")
        post = await post_repo.save(make_post(make_caller("alice")))

        # Act
        result = await use_case.execute(
            AddCommentRequest(caller=bob, post_id=str(post.id), text="  Great!  ")
        )

        # Assert
        assert result.comment_count == 1
        comment = result.comments[0]
        assert comment.text == "Great!"
        assert comment.author_id == str(bob.user_id)
        assert comment.author_username == "bob"

    @pytest.mark.asyncio
    async def test_comments_are_appended_in_order(self, unit_env):
        """Later comments go after earlier ones."""
        # Arrange
        use_case = await unit_env.get(AddCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        alice = make_caller("alice")
        post = await post_repo.save(make_post(alice))

        # Act
        for text in ("one", "two", "three"):
            result = await use_case.execute(
                AddCommentRequest(caller=alice, post_id=str(post.id), text=text)
            )

        # Assert
        assert [c.text for c in result.comments] == ["one", "two", "three"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   ", "c" * 1001])
    async def test_invalid_text(self, unit_env, text):
        """Should reject blank or overlong comments."""
        # Arrange
        use_case = await unit_env.get(AddCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        alice = make_caller("alice")
        post = await post_repo.save(make_post(alice))

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                AddCommentRequest(caller=alice, post_id=str(post.id), text=text)
            )

    @pytest.mark.asyncio
    async def test_cannot_comment_on_hidden_post(self, unit_env):
        """Another user's private post can't be commented on."""
        # Arrange
        use_case = await unit_env.get(AddCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_caller("alice"), is_public=False))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                AddCommentRequest(
                    caller=make_caller("bob"), post_id=str(post.id), text="hi"
                )
            )

    @pytest.mark.asyncio
    async def test_comment_on_unknown_post(self, unit_env):
        """Should raise NotFoundError for an unknown post."""
        use_case = await unit_env.get(AddCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                AddCommentRequest(caller=make_caller(), post_id=str(uuid4()), text="hi")
            )
