"""Unit tests for NotificationService."""

import asyncio
from uuid import uuid4

import pytest

from forum.adapter.pusher.client import MockPusherPublisher
from forum.config import NotificationSettings
from forum.domain.service import NotificationPublisher, NotificationService
from forum.domain.value import (
    AnswerId,
    Email,
    NotificationEvent,
    NotificationStatus,
    QuestionId,
)


class SlowPublisher(NotificationPublisher):
    """Publisher that never finishes in time."""

    async def publish(self, channel, event, payload):
        await asyncio.sleep(10)


def _service(publisher, enabled=True, timeout=0.05) -> NotificationService:
    return NotificationService(
        publisher, NotificationSettings(enabled=enabled, timeout_seconds=timeout)
    )


class TestSend:
    """Tests for send method."""

    @pytest.mark.asyncio
    async def test_send_publishes_to_recipient_channel(self):
        """Events go to the channel keyed by the recipient's email."""
        # Arrange
        publisher = MockPusherPublisher()
        service = _service(publisher)

        # Act
        result = await service.send(
            Email("Alice@Example.com"), NotificationEvent.NEW_ANSWER, {"a": 1}
        )

        # Assert
        assert result.delivered
        assert result.channel == "user-alice@example.com"
        assert publisher.published == [("user-alice@example.com", "new-answer", {"a": 1})]

    @pytest.mark.asyncio
    async def test_disabled_notifications_are_skipped(self):
        """Nothing is published when notifications are switched off."""
        # Arrange
        publisher = MockPusherPublisher()
        service = _service(publisher, enabled=False)

        # Act
        result = await service.send(
            Email("bob@example.com"), NotificationEvent.NEW_VOTE, {}
        )

        # Assert
        assert result.status == NotificationStatus.SKIPPED
        assert publisher.published == []

    @pytest.mark.asyncio
    async def test_transport_error_is_reported_not_raised(self):
        """A transport exception becomes a FAILED result."""
        # Arrange
        publisher = MockPusherPublisher()
        publisher.fail_with = ConnectionError()
        service = _service(publisher)

        # Act
        result = await service.send(
            Email("bob@example.com"), NotificationEvent.NEW_VOTE, {}
        )

        # Assert
        assert result.status == NotificationStatus.FAILED
        assert result.error == "ConnectionError"

    @pytest.mark.asyncio
    async def test_slow_transport_times_out(self):
        """A publish slower than the timeout becomes a FAILED result."""
        # Arrange
        service = _service(SlowPublisher(), timeout=0.01)

        # Act
        result = await service.send(
            Email("bob@example.com"), NotificationEvent.NEW_REPLY, {}
        )

        # Assert
        assert result.status == NotificationStatus.FAILED
        assert result.event == NotificationEvent.NEW_REPLY


class TestPayloads:
    """Tests for the typed notification helpers."""

    @pytest.mark.asyncio
    async def test_reply_notification_payload(self):
        # Arrange
        publisher = MockPusherPublisher()
        service = _service(publisher)
        question_id = QuestionId(uuid4())
        answer_id = AnswerId(uuid4())

        # Act
        await service.send_reply_notification(
            Email("carol@example.com"), "Dave", question_id, answer_id, True
        )

        # Assert
        channel, event, payload = publisher.published[0]
        assert channel == "user-carol@example.com"
        assert event == "new-reply"
        assert payload == {
            "userName": "Dave",
            "questionId": str(question_id),
            "answerId": str(answer_id),
            "isQuestionOwner": True,
        }

    @pytest.mark.asyncio
    async def test_answer_notification_payload(self):
        # Arrange
        publisher = MockPusherPublisher()
        service = _service(publisher)
        question_id = QuestionId(uuid4())
        answer_id = AnswerId(uuid4())

        # Act
        await service.send_answer_notification(
            Email("carol@example.com"), "Dave", "Why?", question_id, answer_id
        )

        # Assert
        _, event, payload = publisher.published[0]
        assert event == "new-answer"
        assert payload["questionTitle"] == "Why?"
        assert payload["userName"] == "Dave"
