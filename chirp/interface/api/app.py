"""FastAPI application."""

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chirp.config import Settings
from chirp.interface.api.errors import setup_exception_handlers
from chirp.interface.api.middleware import (
    RateLimitMiddleware,
    SecurityHeadersMiddleware,
)
from chirp.interface.api.routes import auth, health, posts, users
from chirp.util.di.container import create_container
from chirp.util.observability import instrument_fastapi


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures a console-less Logfire.

    Args:
        container: DI container (defaults to the production container built
            from ``settings``)
        settings: Application settings (defaults to loading from environment)
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Chirp API",
        description="Backend API for Chirp - a small microblog with public and private posts, likes and comments",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Middleware added last runs first: CORS wraps the rate limiter so that
    # 429 responses still carry CORS headers
    app_instance.add_middleware(RateLimitMiddleware, settings=settings.rate_limit)
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type", "Retry-After"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )
    # Outermost, so rate limited and CORS preflight responses get them too
    app_instance.add_middleware(
        SecurityHeadersMiddleware, hsts=settings.api.protocol == "https"
    )

    setup_exception_handlers(app_instance)

    # Setup dependency injection
    setup_dishka(container or create_container(settings), app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(users.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
