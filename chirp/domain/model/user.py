"""User aggregate root.

Users register with a username, email and password. The password is only
ever held as a bcrypt hash.
"""

from datetime import datetime

from pydantic import Field

from chirp.domain.model.common import DomainModel, utcnow
from chirp.domain.value import Email, UserId, Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    email: Email
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
