"""Domain model entities for Chirp."""

from chirp.domain.model.comment import Comment
from chirp.domain.model.post import Post
from chirp.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
]
