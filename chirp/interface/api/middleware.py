"""HTTP middleware: per-client rate limiting and security response headers."""

import logging
import math
import time
from typing import Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from chirp.config import RateLimitSettings

logger = logging.getLogger(__name__)

EXEMPT_PATHS = frozenset({"/health"})


class FixedWindowRateLimiter:
    """Counts requests per key in fixed windows of ``window_seconds``.

    State is in-process only. Counters for past windows are dropped as soon
    as a new window starts.
    """

    def __init__(
        self,
        requests: int,
        window_seconds: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.requests = requests
        self.window_seconds = window_seconds
        self.clock = clock
        self._window: int | None = None
        self._counts: dict[str, int] = {}

    def hit(self, key: str) -> tuple[bool, int]:
        """Record one request for ``key``.

        Returns:
            (allowed, retry_after_seconds). retry_after is 0 when allowed.
        """
        now = self.clock()
        window = int(now // self.window_seconds)

        if window != self._window:
            self._window = window
            self._counts = {}

        count = self._counts.get(key, 0) + 1
        self._counts[key] = count

        if count > self.requests:
            window_end = (window + 1) * self.window_seconds
            return False, max(1, math.ceil(window_end - now))
        return True, 0


def client_key(request: Request) -> str:
    """Client identity for rate limiting: the peer address.

    Behind a trusted proxy uvicorn already rewrites the peer from
    X-Forwarded-For (see ``forwarded_allow_ips``), so request headers are
    never read here.
    """
    return request.client.host if request.client else "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject clients that exceed the configured requests per window with 429."""

    def __init__(self, app, settings: RateLimitSettings, limiter=None) -> None:
        super().__init__(app)
        self.settings = settings
        self.limiter = limiter or FixedWindowRateLimiter(
            requests=settings.requests, window_seconds=settings.window_seconds
        )

    async def dispatch(self, request: Request, call_next):
        if not self.settings.enabled or request.url.path in EXEMPT_PATHS:
            return await call_next(request)

        key = client_key(request)
        allowed, retry_after = self.limiter.hit(key)
        if not allowed:
            logger.warning(f"Rate limit exceeded for {key} on {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                content={"detail": "Too many requests"},
                headers={"Retry-After": str(retry_after)},
            )

        return await call_next(request)


SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
}

HSTS_HEADER = "max-age=15552000; includeSubDomains"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add hardening headers to every response, errors included.

    Strict-Transport-Security is only sent when the API is served over HTTPS.
    Headers already set by a route are left alone.
    """

    def __init__(self, app, hsts: bool = False) -> None:
        super().__init__(app)
        self.headers = dict(SECURITY_HEADERS)
        if hsts:
            self.headers["Strict-Transport-Security"] = HSTS_HEADER

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        for name, value in self.headers.items():
            response.headers.setdefault(name, value)
        return response
