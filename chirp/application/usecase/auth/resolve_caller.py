"""Resolve the caller of a request from its credentials."""

import logfire

from chirp.domain.error import UnauthenticatedError, ValidationError
from chirp.domain.service import JWTService
from chirp.domain.value import Caller, UserId, parse_id
from chirp.util.jwt import MalformedTokenError, TokenExpiredError

BEARER_SCHEME = "bearer"


def extract_token(authorization: str | None, cookie_token: str | None) -> str:
    """Pick the token out of the request credentials.

    The Authorization header wins over the cookie. A header that is present
    but not of the form ``Bearer <token>`` is rejected outright; the cookie
    isn't consulted in that case.

    Raises:
        UnauthenticatedError: If no usable token was supplied
    """
    if authorization is not None:
        scheme, _, token = authorization.strip().partition(" ")
        token = token.strip()
        if scheme.lower() != BEARER_SCHEME or not token or " " in token:
            raise UnauthenticatedError("Malformed Authorization header")
        return token

    if cookie_token:
        return cookie_token

    raise UnauthenticatedError("Authentication required")


def resolve_caller(
    authorization: str | None,
    cookie_token: str | None,
    jwt_service: JWTService,
) -> Caller:
    """Turn request credentials into a Caller.

    Args:
        authorization: Raw Authorization header, if any
        cookie_token: Value of the auth cookie, if any
        jwt_service: Service used to verify the token

    Returns:
        The authenticated caller

    Raises:
        UnauthenticatedError: If the token is missing, malformed or expired
    """
    token = extract_token(authorization, cookie_token)

    try:
        payload = jwt_service.verify_token(token)
    except TokenExpiredError:
        raise UnauthenticatedError("Token expired")
    except MalformedTokenError:
        raise UnauthenticatedError("Invalid token")

    try:
        user_id = parse_id(UserId, payload.user_id, "user id")
    except ValidationError:
        logfire.warn("Token carries a malformed user id")
        raise UnauthenticatedError("Invalid token")

    return Caller(user_id=user_id, username=payload.username)
