"""Domain value objects for Chirp."""

from chirp.domain.value.identifiers import CommentId, PostId, UserId, parse_id
from chirp.domain.value.types import Caller, Email, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "parse_id",
    # Types
    "Username",
    "Email",
    "Caller",
]
