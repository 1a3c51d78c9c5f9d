"""Pusher publisher implementation.

Delivers notification events through Pusher Channels.
"""

import asyncio
from typing import Any

import logfire
import pusher

from forum.adapter.error import NotificationTransportError
from forum.domain.service.notification_service import NotificationPublisher


class PusherPublisher(NotificationPublisher):
    """Base class for Pusher publishers.

    Provides type distinction for dependency injection.
    """

    pass


class RealPusherPublisher(PusherPublisher):
    """Publisher backed by the Pusher HTTP API.

    The underlying client is created on first publish, so a deployment
    with notifications disabled never needs credentials.
    """

    def __init__(
        self,
        app_id: str,
        key: str,
        secret: str,
        cluster: str,
        ssl: bool = True,
        timeout: float = 5.0,
    ) -> None:
        """Initialize Pusher publisher.

        Args:
            app_id: Pusher app ID
            key: Pusher app key
            secret: Pusher app secret
            cluster: Pusher cluster (e.g. "eu")
            ssl: Whether to use HTTPS
            timeout: HTTP timeout in seconds
        """
        self.app_id = app_id
        self.key = key
        self.secret = secret
        self.cluster = cluster
        self.ssl = ssl
        self.timeout = timeout
        self._client: pusher.Pusher | None = None

    @property
    def client(self) -> pusher.Pusher:
        """Pusher client, created on first use."""
        if self._client is None:
            self._client = pusher.Pusher(
                app_id=self.app_id,
                key=self.key,
                secret=self.secret,
                cluster=self.cluster,
                ssl=self.ssl,
                timeout=self.timeout,
            )
        return self._client

    async def publish(self, channel: str, event: str, payload: dict[str, Any]) -> None:
        """Trigger an event on a Pusher channel.

        Args:
            channel: Channel name
            event: Event name
            payload: Event data

        Raises:
            NotificationTransportError: If Pusher rejects the request or
                cannot be reached
        """
        try:
            client = self.client
            # The pusher client is synchronous
            await asyncio.to_thread(client.trigger, channel, event, payload)
        except Exception as e:
            logfire.warn("Pusher trigger failed", channel=channel, error=str(e))
            raise NotificationTransportError(f"Pusher trigger failed: {e}") from e


class MockPusherPublisher(PusherPublisher):
    """Mock Pusher publisher for testing.

    Records published events instead of calling Pusher. Set ``fail_with``
    to an exception to make every publish raise it.
    """

    def __init__(self) -> None:
        self.published: list[tuple[str, str, dict[str, Any]]] = []
        self.fail_with: Exception | None = None

    async def publish(self, channel: str, event: str, payload: dict[str, Any]) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.published.append((channel, event, payload))
