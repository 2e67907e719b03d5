"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from chirp.config import AuthSettings, RateLimitSettings, Settings
from chirp.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Configuration provider.

    ``Settings`` is not built here: the container receives it as context, so
    the FastAPI app and its container read one and the same instance.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_rate_limit_settings(self, settings: Settings) -> RateLimitSettings:
        """Provide rate limit settings."""
        return settings.rate_limit
