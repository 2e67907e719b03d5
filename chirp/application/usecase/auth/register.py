"""Register use case."""

import logfire
from pydantic import BaseModel

from chirp.domain.service import AccountService, JWTService

from .views import AccountView, AuthResponse


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str
    password: str


class RegisterUseCase:
    """Use case for creating an account with a password."""

    def __init__(self, account_service: AccountService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            account_service: Account domain service
            jwt_service: JWT token domain service
        """
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration flow.

        Steps:
        1. Validate fields and check uniqueness (via AccountService)
        2. Store the user with a hashed password
        3. Issue a token for the new user

        Args:
            request: Register request

        Returns:
            Token and the created account

        Raises:
            ValidationError: If a field is invalid
            ConflictError: If the email or username is taken
        """
        user = await self.account_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
        )

        token = self.jwt_service.create_token(user.id, user.username.root)
        logfire.info("Registration complete", user_id=str(user.id))

        return AuthResponse(token=token, user=AccountView.from_user(user))
