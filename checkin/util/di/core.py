"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from checkin.config import ApiLogSettings, AuthSettings, Settings, TagSettings
from checkin.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
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
    def provide_tag_settings(self, settings: Settings) -> TagSettings:
        """Provide status tag settings."""
        return settings.tags

    @provide(scope=Scope.APP)
    def provide_api_log_settings(self, settings: Settings) -> ApiLogSettings:
        """Provide API log settings."""
        return settings.api_log
