"""Response models shared by the authentication use cases."""

from datetime import datetime

from pydantic import BaseModel

from chirp.domain.model import User


class AccountView(BaseModel):
    """The signed-in user's own account. Never carries the password hash."""

    id: str
    username: str
    email: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "AccountView":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    """Token and account returned by register and login."""

    token: str
    user: AccountView
