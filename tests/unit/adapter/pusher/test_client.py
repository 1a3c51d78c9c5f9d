"""Unit tests for the Pusher publisher."""

import pusher
import pytest

from forum.adapter.error import NotificationTransportError
from forum.adapter.pusher.client import RealPusherPublisher


class FakePusherClient:
    """Stands in for pusher.Pusher and records trigger calls."""

    def __init__(self, error: Exception | None = None):
        self.calls = []
        self.error = error

    def trigger(self, channel, event, data):
        if self.error is not None:
            raise self.error
        self.calls.append((channel, event, data))
        return {}


def _publisher() -> RealPusherPublisher:
    return RealPusherPublisher(app_id="123", key="key", secret="secret", cluster="eu")


class TestRealPusherPublisher:
    """Tests for RealPusherPublisher."""

    def test_client_is_created_lazily(self):
        """No Pusher client exists until one is needed."""
        publisher = _publisher()

        assert publisher._client is None
        assert isinstance(publisher.client, pusher.Pusher)
        assert publisher.client is publisher.client

    @pytest.mark.asyncio
    async def test_publish_triggers_event(self):
        # Arrange
        publisher = _publisher()
        fake = FakePusherClient()
        publisher._client = fake

        # Act
        await publisher.publish("user-a@example.com", "new-vote", {"voteType": "up"})

        # Assert
        assert fake.calls == [("user-a@example.com", "new-vote", {"voteType": "up"})]

    @pytest.mark.asyncio
    async def test_publish_failure_raises_transport_error(self):
        # Arrange
        publisher = _publisher()
        publisher._client = FakePusherClient(error=ConnectionError("refused"))

        # Act & Assert
        with pytest.raises(NotificationTransportError, match="refused"):
            await publisher.publish("user-a@example.com", "new-vote", {})
