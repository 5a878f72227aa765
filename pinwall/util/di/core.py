"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from pinwall.config import AuthSettings, Settings
from pinwall.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider: settings come from the environment and .env."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth
