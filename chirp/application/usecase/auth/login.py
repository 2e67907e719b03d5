"""Login use case."""

import logfire
from pydantic import BaseModel

from chirp.domain.service import AccountService, JWTService

from .views import AccountView, AuthResponse


class LoginRequest(BaseModel):
    """Email and password login request."""

    email: str
    password: str


class LoginUseCase:
    """Use case for password login."""

    def __init__(self, account_service: AccountService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            account_service: Account domain service
            jwt_service: JWT token domain service
        """
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Args:
            request: Login request

        Returns:
            Token and the signed-in account

        Raises:
            InvalidCredentialsError: If the email is unknown or the password
                is wrong (same error for both)
        """
        user = await self.account_service.authenticate(request.email, request.password)

        token = self.jwt_service.create_token(user.id, user.username.root)
        logfire.info("Login complete", user_id=str(user.id))

        return AuthResponse(token=token, user=AccountView.from_user(user))
