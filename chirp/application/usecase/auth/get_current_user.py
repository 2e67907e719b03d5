"""Get current user use case."""

import logfire
from pydantic import BaseModel

from chirp.domain.error import UnauthenticatedError
from chirp.domain.service import UserService
from chirp.domain.value import Caller

from .views import AccountView


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    caller: Caller


class GetCurrentUserUseCase:
    """Use case for getting the current authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> AccountView:
        """Load the caller's account.

        Args:
            request: Request carrying the resolved caller

        Returns:
            The caller's account

        Raises:
            UnauthenticatedError: If the token's user no longer exists
        """
        user = await self.user_service.find_by_id(request.caller.user_id)
        if user is None:
            logfire.warn(
                "Token refers to a missing user", user_id=str(request.caller.user_id)
            )
            raise UnauthenticatedError("User no longer exists")

        return AccountView.from_user(user)
