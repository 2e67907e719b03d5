"""Comment entity.

Comments belong to exactly one post and are append-only: once added they
are never edited or removed on their own.
"""

from datetime import datetime

from pydantic import Field

from chirp.domain.model.common import DomainModel, utcnow
from chirp.domain.value import CommentId, UserId

MAX_COMMENT_LENGTH = 1000


class Comment(DomainModel):
    """Comment entity.

    The author username is a snapshot taken when the comment was written.
    """

    id: CommentId
    author_id: UserId
    author_username: str
    text: str = Field(min_length=1, max_length=MAX_COMMENT_LENGTH)
    created_at: datetime = Field(default_factory=utcnow)
