"""PostgreSQL repository implementations."""

from chirp.persistence.repository.post import PostgresPostRepository
from chirp.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
]
