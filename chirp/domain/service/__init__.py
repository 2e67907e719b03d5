"""Domain services."""

from .account_service import AccountService
from .base import Service
from .jwt_service import JWTService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "AccountService",
    "JWTService",
    "PostService",
    "Service",
    "UserService",
]
