"""In-memory user repository for testing."""

from typing import Optional

from chirp.domain.error import ConflictError
from chirp.domain.model.user import User
from chirp.domain.repository.user import UserRepository
from chirp.domain.value import Email, UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user, enforcing unique email and username."""
        for other in self._users.values():
            if other.id == user.id:
                continue
            if other.email == user.email:
                raise ConflictError("email")
            if other.username == user.username:
                raise ConflictError("username")
        self._users[user.id] = user
        return user
