"""Strongly typed identifiers for Chirp domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType, TypeVar
from uuid import UUID

from chirp.domain.error import ValidationError

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)

IdT = TypeVar("IdT", UserId, PostId, CommentId)


def parse_id(id_type: type[IdT], value: str | UUID, label: str = "id") -> IdT:
    """Parse an externally supplied identifier.

    Args:
        id_type: Identifier NewType to wrap the parsed UUID in
        value: Raw value from a path, body or token
        label: Name used in the error message

    Returns:
        The typed identifier

    Raises:
        ValidationError: If the value is not a well-formed UUID
    """
    if isinstance(value, UUID):
        return id_type(value)
    try:
        return id_type(UUID(value))
    except (ValueError, TypeError, AttributeError):
        raise ValidationError(f"Invalid {label}: {value}")
