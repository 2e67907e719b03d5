"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from chirp.domain.service import UserService
from chirp.domain.value import Caller, UserId, parse_id


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    caller: Caller
    user_id: str


class GetUserProfileResponse(BaseModel):
    """Public profile. Email and password hash are never exposed here."""

    id: str
    username: str
    created_at: datetime


class GetUserProfileUseCase:
    """Use case for getting a user's public profile by id."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Args:
            request: Request with user id

        Returns:
            Public profile information

        Raises:
            ValidationError: If the user id is malformed
            NotFoundError: If no such user exists
        """
        user_id = parse_id(UserId, request.user_id, "user id")
        user = await self.user_service.get_by_id(user_id)

        return GetUserProfileResponse(
            id=str(user.id),
            username=user.username.root,
            created_at=user.created_at,
        )
