"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from chirp.domain.model import Comment, Post, User
from chirp.domain.value import CommentId, Email, PostId, UserId, Username


def _uuid(value: Any) -> UUID:
    """asyncpg returns UUID objects, other drivers may return strings."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email.root,
        "password_hash": user.password_hash,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=row["author_username"],
        text=row["text"],
        created_at=row["created_at"],
    )


def comment_to_dict(post_id: PostId, comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict (seq is assigned by the DB)."""
    return {
        "id": comment.id,
        "post_id": post_id,
        "author_id": comment.author_id,
        "author_username": comment.author_username,
        "text": comment.text,
        "created_at": comment.created_at,
    }


def row_to_post(
    row: Dict[str, Any],
    likes: Iterable[Any] = (),
    comments: Iterable[Comment] = (),
) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        likes: User ids from post_likes, oldest first
        comments: Comments in the order they were added

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_username=row["author_username"],
        content=row["content"],
        is_public=row["is_public"],
        likes=tuple(UserId(_uuid(user_id)) for user_id in likes),
        comments=tuple(comments),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Likes and comments live in their own tables and seq is assigned by the
    database, so none of them are included.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "author_id": post.author_id,
        "author_username": post.author_username,
        "content": post.content,
        "is_public": post.is_public,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }
