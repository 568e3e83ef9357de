"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from gallery.config import AuthSettings, Settings, WhitelistSettings
from gallery.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings loaded from environment variables and the .env file."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_whitelist_settings(self, settings: Settings) -> WhitelistSettings:
        return settings.whitelist
