"""Observability configuration using Logfire.

Services and use cases open spans around their work and emit structured
events, e.g.::

    with logfire.span("post_service.toggle_like", post_id=str(post_id)):
        liked = await self.post_repository.toggle_like(post_id, user_id)
        logfire.info("Like toggled", liked=liked)

Nothing leaves the process unless a Logfire token is configured.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from chirp.config import ObservabilitySettings, Settings

SERVICE_NAME = "chirp-backend"


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Explicit OBSERVABILITY__SEND_TO_LOGFIRE wins, otherwise send iff a token is set."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request with its method, path and client host.

    Headers are not captured: Authorization and Cookie carry tokens.
    """

    def _request_attributes(request, attributes):
        result = {**attributes, "method": request.method, "path": request.url.path}
        if request.client:
            result["client_host"] = request.client.host
        return result

    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every SQL statement run through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
