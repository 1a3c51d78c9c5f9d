"""Configuration provider."""

from dishka import Scope, provide

from forum.config import AuthSettings, Settings
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings for the whole process, read once from the environment and .env."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Auth section on its own, for the JWT service."""
        return settings.auth
