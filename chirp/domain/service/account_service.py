"""Account domain service.

Registration and password login. Tokens are issued by JWTService; this
service only deals with users and their credentials.
"""

import asyncio
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from chirp.config import AuthSettings
from chirp.domain.error import ConflictError, InvalidCredentialsError, ValidationError
from chirp.domain.model import User
from chirp.domain.model.common import utcnow
from chirp.domain.value import Email, UserId, Username
from chirp.util.passwords import MAX_PASSWORD_BYTES, hash_password, verify_password

from .base import Service
from .user_service import UserService

MIN_PASSWORD_LENGTH = 6


def _first_error(exc: PydanticValidationError) -> str:
    """Human readable message of the first pydantic error."""
    message = exc.errors()[0]["msg"]
    return message.removeprefix("Value error, ")


class AccountService(Service):
    """Domain service for account registration and authentication."""

    def __init__(self, user_service: UserService, auth_settings: AuthSettings) -> None:
        """Initialize account service.

        Args:
            user_service: User domain service
            auth_settings: Authentication settings (bcrypt work factor)
        """
        self.user_service = user_service
        self.auth_settings = auth_settings

    @staticmethod
    def parse_username(raw: str) -> Username:
        """Validate a username.

        Raises:
            ValidationError: If the username is malformed
        """
        try:
            return Username(raw.strip())
        except PydanticValidationError as e:
            raise ValidationError(_first_error(e))

    @staticmethod
    def parse_email(raw: str) -> Email:
        """Validate and normalise an email address.

        Raises:
            ValidationError: If the email is malformed
        """
        try:
            return Email(raw)
        except PydanticValidationError as e:
            raise ValidationError(_first_error(e))

    @staticmethod
    def check_password(password: str) -> None:
        """Validate password strength rules.

        Raises:
            ValidationError: If the password is too short or too long
        """
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )

    async def register(self, username: str, email: str, password: str) -> User:
        """Create a new user account.

        Args:
            username: Requested username
            email: Email address
            password: Plain text password

        Returns:
            The created user

        Raises:
            ValidationError: If any field is invalid
            ConflictError: If the email or username is already registered
        """
        parsed_username = self.parse_username(username)
        parsed_email = self.parse_email(email)
        self.check_password(password)

        with logfire.span("account_service.register", username=parsed_username.root):
            if await self.user_service.get_user_by_email(parsed_email):
                logfire.warn("Registration rejected, email taken")
                raise ConflictError("email")
            if await self.user_service.get_user_by_username(parsed_username):
                logfire.warn(
                    "Registration rejected, username taken",
                    username=parsed_username.root,
                )
                raise ConflictError("username")

            # bcrypt is CPU bound, keep it off the event loop
            password_hash = await asyncio.to_thread(
                hash_password, password, self.auth_settings.bcrypt_rounds
            )

            now = utcnow()
            user = User(
                id=UserId(uuid4()),
                username=parsed_username,
                email=parsed_email,
                password_hash=password_hash,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_service.save(user)
            logfire.info(
                "User registered", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check an email/password pair.

        Args:
            email: Email address
            password: Plain text password

        Returns:
            The matching user

        Raises:
            InvalidCredentialsError: If the email is unknown or the password
                doesn't match
        """
        with logfire.span("account_service.authenticate"):
            try:
                parsed_email = Email(email)
            except PydanticValidationError:
                raise InvalidCredentialsError()

            user = await self.user_service.get_user_by_email(parsed_email)
            if user is None or not await asyncio.to_thread(
                verify_password, password, user.password_hash
            ):
                logfire.warn("Login failed")
                raise InvalidCredentialsError()

            logfire.info("User authenticated", user_id=str(user.id))
            return user
