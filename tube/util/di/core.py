"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from tube.config import AuthSettings, ConcurrencySettings, ListingSettings, Settings
from tube.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Nested sections are provided separately so services depend only on the
    section they use.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_listing_settings(self, settings: Settings) -> ListingSettings:
        """Provide listing page size settings."""
        return settings.listing

    @provide(scope=Scope.APP)
    def provide_concurrency_settings(self, settings: Settings) -> ConcurrencySettings:
        """Provide optimistic write retry settings."""
        return settings.concurrency
