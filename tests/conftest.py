"""Test configuration and fixtures."""

import os

# Must be set before chirp modules build their Settings
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-signing-secret")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

from datetime import timedelta  # noqa: E402
from uuid import uuid4  # noqa: E402

import logfire  # noqa: E402

from chirp.domain.model import Comment, Post  # noqa: E402
from chirp.domain.model.common import utcnow  # noqa: E402
from chirp.domain.value import Caller, CommentId, PostId, UserId  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)


def make_caller(username: str = "alice") -> Caller:
    """Helper to build an authenticated caller with a fresh id."""
    return Caller(user_id=UserId(uuid4()), username=username)


def make_post(
    author: Caller,
    content: str = "Hello world",
    is_public: bool = True,
    age_seconds: int = 0,
) -> Post:
    """Helper to build a post owned by ``author``.

    Args:
        author: Owner of the post
        content: Post content
        is_public: Visibility
        age_seconds: How far in the past the post was created
    """
    created_at = utcnow() - timedelta(seconds=age_seconds)
    return Post(
        id=PostId(uuid4()),
        author_id=author.user_id,
        author_username=author.username,
        content=content,
        is_public=is_public,
        created_at=created_at,
        updated_at=created_at,
    )


def make_comment(author: Caller, text: str = "Nice post") -> Comment:
    """Helper to build a comment written by ``author``."""
    return Comment(
        id=CommentId(uuid4()),
        author_id=author.user_id,
        author_username=author.username,
        text=text,
        created_at=utcnow(),
    )
