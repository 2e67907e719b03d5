"""Production dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from chirp.config import Settings
from chirp.util.di import PROVIDERS, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the production container around a single ``Settings``.

    Args:
        settings: Application settings, loaded from the environment if omitted

    Returns:
        Container with the Postgres persistence provider and the FastAPI
        request provider
    """
    settings = settings or Settings()
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *providers, FastapiProvider(), context={Settings: settings}
    )
