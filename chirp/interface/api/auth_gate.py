"""Authentication dependency for routes that need a caller."""

from dishka import AsyncContainer
from fastapi import Request

from chirp.application.usecase.auth import resolve_caller
from chirp.config import AuthSettings
from chirp.domain.service import JWTService
from chirp.domain.value import Caller


async def require_caller(request: Request) -> Caller:
    """Resolve the request's caller or fail with UnauthenticatedError.

    Reads the Bearer token from the Authorization header, falling back to
    the auth cookie. The resolved Caller is also stored on
    ``request.state.caller``.

    Raises:
        UnauthenticatedError: If no valid token was supplied
    """
    container: AsyncContainer = request.state.dishka_container
    jwt_service = await container.get(JWTService)
    auth_settings = await container.get(AuthSettings)

    caller = resolve_caller(
        authorization=request.headers.get("Authorization"),
        cookie_token=request.cookies.get(auth_settings.cookie_name),
        jwt_service=jwt_service,
    )
    request.state.caller = caller
    return caller
