"""Repository interfaces for Chirp domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from chirp.domain.repository.post import PostRepository
from chirp.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
]
