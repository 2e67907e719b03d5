"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from chirp.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from chirp.application.usecase.auth.views import AccountView, AuthResponse
from chirp.config import Settings
from chirp.domain.value import Caller
from chirp.interface.api.auth_gate import require_caller

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registering an account."""

    username: str
    email: str
    password: str


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: str
    password: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


def _cookie_options(settings: Settings) -> dict:
    """Cookie attributes shared by set and delete.

    Production serves the frontend from another site over HTTPS, which needs
    SameSite=None and Secure.
    """
    is_production = settings.is_production
    return {
        "key": settings.auth.cookie_name,
        "httponly": True,
        "secure": is_production,
        "samesite": "none" if is_production else "lax",
        "path": "/",
    }


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        value=token,
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
        **_cookie_options(settings),
    )


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    response: Response,
    register_use_case: FromDishka[RegisterUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Create an account, returning a token and setting the auth cookie.

    Raises:
        ValidationError: If a field is invalid (400)
        ConflictError: If the email or username is taken (409)
    """
    result = await register_use_case.execute(
        RegisterRequest(
            username=request.username,
            email=request.email,
            password=request.password,
        )
    )

    _set_auth_cookie(response, result.token, settings)
    logger.info(f"Registered user {result.user.id}")
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Log in with email and password.

    Raises:
        InvalidCredentialsError: On unknown email or wrong password (401)
    """
    result = await login_use_case.execute(
        LoginRequest(email=request.email, password=request.password)
    )

    _set_auth_cookie(response, result.token, settings)
    logger.info(f"User {result.user.id} logged in")
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Clear the auth cookie.

    Tokens are stateless, so a token copied elsewhere stays valid until it
    expires.
    """
    options = _cookie_options(settings)
    response.delete_cookie(
        key=options.pop("key"),
        **options,
    )
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AccountView)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    caller: Caller = Depends(require_caller),
) -> AccountView:
    """Return the authenticated user's account.

    Raises:
        UnauthenticatedError: If there is no valid token or the user is gone (401)
    """
    return await get_current_user_use_case.execute(GetCurrentUserRequest(caller=caller))
