"""Pusher infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.pusher.client import PusherPublisher, RealPusherPublisher
from forum.config import NotificationSettings, Settings
from forum.domain.service import NotificationPublisher
from forum.util.di.base import ProviderBase
from forum.util.error import ConfigurationError


class PusherProvider(ProviderBase):
    """Pusher component base.

    Implementations provide the notification settings, the Pusher
    publisher, and expose that publisher as the domain's
    NotificationPublisher.
    """

    __mock_component__ = "pusher"


class ProdPusherProvider(PusherProvider):
    """Production Pusher provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notification_settings(self, settings: Settings) -> NotificationSettings:
        """Provide notification settings."""
        return settings.notifications

    @provide(scope=Scope.APP)
    def get_pusher_publisher(self, settings: NotificationSettings) -> PusherPublisher:
        """Provide Pusher publisher.

        Raises:
            ConfigurationError: If notifications are enabled without credentials
        """
        if settings.enabled and not (
            settings.app_id and settings.key and settings.secret
        ):
            raise ConfigurationError(
                "Pusher app_id, key and secret must be configured when "
                "notifications are enabled"
            )

        return RealPusherPublisher(
            app_id=settings.app_id,
            key=settings.key,
            secret=settings.secret,
            cluster=settings.cluster,
            ssl=settings.ssl,
            timeout=settings.timeout_seconds,
        )

    @provide(scope=Scope.APP)
    def get_notification_publisher(
        self, publisher: PusherPublisher
    ) -> NotificationPublisher:
        """Expose the Pusher publisher as the notification transport."""
        return publisher
