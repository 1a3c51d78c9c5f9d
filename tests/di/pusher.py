"""Mock Pusher providers for testing."""

from dishka import Scope, provide

from forum.adapter.pusher.client import MockPusherPublisher, PusherPublisher
from forum.config import NotificationSettings
from forum.domain.service import NotificationPublisher
from forum.util.di.infrastructure.pusher import PusherProvider


class MockPusherProvider(PusherProvider):
    """Mock Pusher provider that records events instead of sending them.

    Notifications are enabled so tests can assert on what was published.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_notification_settings(self) -> NotificationSettings:
        """Provide notification settings with delivery switched on."""
        return NotificationSettings(enabled=True, timeout_seconds=0.5)

    @provide(scope=Scope.APP)
    def get_pusher_publisher(self) -> PusherPublisher:
        """Provide mock Pusher publisher."""
        return MockPusherPublisher()

    @provide(scope=Scope.APP)
    def get_notification_publisher(
        self, publisher: PusherPublisher
    ) -> NotificationPublisher:
        """Expose the mock publisher as the notification transport."""
        return publisher
