"""Post aggregate root.

A post owns its likes and its comments. Likes are a set of user ids and
comments are kept in the order they were added.
"""

from datetime import datetime

from pydantic import Field, field_validator

from chirp.domain.model.comment import Comment
from chirp.domain.model.common import DomainModel, utcnow
from chirp.domain.value import PostId, UserId

MAX_CONTENT_LENGTH = 5000


class Post(DomainModel):
    """Post aggregate root.

    author_id and author_username are fixed at creation. updated_at tracks
    edits by the author only; likes and comments leave it untouched.
    """

    id: PostId
    author_id: UserId
    author_username: str
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    is_public: bool = True
    likes: tuple[UserId, ...] = ()
    comments: tuple[Comment, ...] = ()
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("likes")
    @classmethod
    def validate_unique_likes(cls, v: tuple[UserId, ...]) -> tuple[UserId, ...]:
        """A user can like a post at most once."""
        if len(set(v)) != len(v):
            raise ValueError("A user can like a post only once")
        return v

    def is_visible_to(self, user_id: UserId) -> bool:
        """Whether the given user may see this post."""
        return self.is_public or self.author_id == user_id

    def is_owned_by(self, user_id: UserId) -> bool:
        """Whether the given user authored this post."""
        return self.author_id == user_id

    def is_liked_by(self, user_id: UserId) -> bool:
        """Whether the given user has liked this post."""
        return user_id in self.likes
