"""Integration tests for PostgresPostRepository and PostgresUserRepository.

These tests need a migrated PostgreSQL database (DATABASE__URL) and only run
when RUN_INTEGRATION_TESTS is set.
"""

import os
from datetime import timedelta
from uuid import uuid4

import pytest

from chirp.domain.error import ConflictError, NotFoundError
from chirp.domain.model import Comment, Post, User
from chirp.domain.model.common import utcnow
from chirp.domain.repository import PostRepository, UserRepository
from chirp.domain.value import CommentId, Email, PostId, UserId, Username
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("RUN_INTEGRATION_TESTS"),
    reason="set RUN_INTEGRATION_TESTS=1 with a migrated database to run",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _user() -> User:
    suffix = uuid4().hex[:8]
    now = utcnow()
    return User(
        id=UserId(uuid4()),
        username=Username(f"user_{suffix}"),
        email=Email(f"{suffix}@example.com"),
        password_hash="$2b$04$integrationtesthashvalue",
        created_at=now,
        updated_at=now,
    )


def _post(author: User, content: str, is_public: bool = True, age: int = 0) -> Post:
    created_at = utcnow() - timedelta(seconds=age)
    return Post(
        id=PostId(uuid4()),
        author_id=author.id,
        author_username=author.username.root,
        content=content,
        is_public=is_public,
        created_at=created_at,
        updated_at=created_at,
    )


class TestUserRepositoryIntegration:
    """Unique constraints surface as ConflictError."""

    @pytest.mark.asyncio
    async def test_duplicate_email(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.save(_user())
        clash = _user().model_copy(update={"email": user.email})

        # Act & Assert
        with pytest.raises(ConflictError) as exc_info:
            await user_repo.save(clash)
        assert exc_info.value.field == "email"


class TestPostRepositoryIntegration:
    """Post persistence including likes and comments."""

    @pytest.mark.asyncio
    async def test_save_and_find_by_author(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(_user())
        older = await post_repo.save(_post(author, "older", age=10))
        newer = await post_repo.save(_post(author, "newer", is_public=False))

        # Act
        everything = await post_repo.find_by_author(author.id, include_private=True)
        public = await post_repo.find_by_author(author.id, include_private=False)

        # Assert
        assert [p.id for p in everything] == [newer.id, older.id]
        assert [p.id for p in public] == [older.id]
        assert await post_repo.count_by_author(author.id, include_private=True) == 2

    @pytest.mark.asyncio
    async def test_toggle_like_and_comments(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(_user())
        fan = await user_repo.save(_user())
        post = await post_repo.save(_post(author, "hello"))

        # Act
        assert await post_repo.toggle_like(post.id, fan.id) is True
        for text in ("one", "two"):
            await post_repo.append_comment(
                post.id,
                Comment(
                    id=CommentId(uuid4()),
                    author_id=fan.id,
                    author_username=fan.username.root,
                    text=text,
                    created_at=utcnow(),
                ),
            )
        stored = await post_repo.find_by_id(post.id)

        # Assert
        assert stored.likes == (fan.id,)
        assert [c.text for c in stored.comments] == ["one", "two"]
        assert await post_repo.toggle_like(post.id, fan.id) is False

    @pytest.mark.asyncio
    async def test_delete_cascades(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(_user())
        post = await post_repo.save(_post(author, "short lived"))
        await post_repo.toggle_like(post.id, author.id)

        # Act
        deleted = await post_repo.delete(post.id)

        # Assert
        assert deleted is True
        assert await post_repo.find_by_id(post.id) is None
        assert await post_repo.delete(post.id) is False

    @pytest.mark.asyncio
    async def test_like_and_comment_on_deleted_post(self, integration_env):
        """A post deleted between the read and the write is reported missing."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(_user())
        fan = await user_repo.save(_user())
        post = await post_repo.save(_post(author, "gone soon"))
        await post_repo.delete(post.id)
        comment = Comment(
            id=CommentId(uuid4()),
            author_id=fan.id,
            author_username=fan.username.root,
            text="too late",
            created_at=utcnow(),
        )

        # Act & Assert
        with pytest.raises(NotFoundError):
            await post_repo.toggle_like(post.id, fan.id)
        with pytest.raises(NotFoundError):
            await post_repo.append_comment(post.id, comment)

        # The session is still usable after the failed inserts
        assert await post_repo.find_by_id(post.id) is None
