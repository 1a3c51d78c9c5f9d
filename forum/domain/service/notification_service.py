"""Notification domain service.

Notifications are a best-effort side channel: a failed or slow publish
is logged and reported back to the caller, but never undoes or fails
the write that triggered it.
"""

import asyncio
from typing import Any, Optional

import logfire

from forum.config import NotificationSettings
from forum.domain.value import (
    AnswerId,
    Email,
    NotificationEvent,
    NotificationStatus,
    QuestionId,
    VoteDirection,
)
from forum.domain.value.common import ValueObject

from .base import Service


class NotificationPublisher:
    """Transport that delivers an event to a named channel."""

    async def publish(self, channel: str, event: str, payload: dict[str, Any]) -> None:
        """Publish one event.

        Args:
            channel: Channel name (one per recipient)
            event: Event name
            payload: JSON-serialisable event data

        Raises:
            Exception: Any transport failure
        """
        raise NotImplementedError


class NotificationResult(ValueObject):
    """What happened to a single notification attempt."""

    status: NotificationStatus
    event: Optional[NotificationEvent] = None
    channel: Optional[str] = None
    error: Optional[str] = None

    @property
    def delivered(self) -> bool:
        return self.status == NotificationStatus.SENT


class NotificationService(Service):
    """Domain service that pushes real-time events to users."""

    def __init__(
        self, publisher: NotificationPublisher, settings: NotificationSettings
    ) -> None:
        """Initialize notification service.

        Args:
            publisher: Notification transport
            settings: Notification settings (enabled flag, timeout)
        """
        self.publisher = publisher
        self.settings = settings

    @staticmethod
    def channel_for(email: Email) -> str:
        """Channel a user listens on for their notifications."""
        return f"user-{email.root}"

    @staticmethod
    def skipped(
        event: Optional[NotificationEvent] = None, reason: str | None = None
    ) -> NotificationResult:
        """Result for a notification that was deliberately not sent."""
        return NotificationResult(
            status=NotificationStatus.SKIPPED, event=event, error=reason
        )

    async def send(
        self, recipient: Email, event: NotificationEvent, data: dict[str, Any]
    ) -> NotificationResult:
        """Publish an event to a user's channel.

        Never raises: transport errors and timeouts come back as a
        FAILED result.

        Args:
            recipient: Email of the user to notify
            event: Event to publish
            data: Event payload

        Returns:
            Outcome of the attempt
        """
        if not self.settings.enabled:
            return self.skipped(event, "notifications disabled")

        channel = self.channel_for(recipient)
        with logfire.span(
            "notification_service.send", channel=channel, notification_event=event.value
        ):
            try:
                await asyncio.wait_for(
                    self.publisher.publish(channel, event.value, data),
                    timeout=self.settings.timeout_seconds,
                )
            except Exception as e:
                # Side channel only; the triggering write commits when the request ends
                error = str(e) or type(e).__name__
                logfire.error(
                    "Notification publish failed",
                    channel=channel,
                    notification_event=event.value,
                    error=error,
                )
                return NotificationResult(
                    status=NotificationStatus.FAILED,
                    event=event,
                    channel=channel,
                    error=error,
                )

            logfire.info(
                "Notification sent", channel=channel, notification_event=event.value
            )
            return NotificationResult(
                status=NotificationStatus.SENT, event=event, channel=channel
            )

    async def send_vote_notification(
        self,
        owner_email: Email,
        direction: VoteDirection,
        question_id: QuestionId,
        answer_id: AnswerId,
    ) -> NotificationResult:
        """Tell an answer's author that someone voted on it."""
        return await self.send(
            owner_email,
            NotificationEvent.NEW_VOTE,
            {
                "voteType": direction.value,
                "contentType": "answer",
                "questionId": str(question_id),
                "answerId": str(answer_id),
            },
        )

    async def send_answer_notification(
        self,
        question_owner_email: Email,
        answerer_name: str,
        question_title: str,
        question_id: QuestionId,
        answer_id: AnswerId,
    ) -> NotificationResult:
        """Tell a question's author that it received a top-level answer."""
        return await self.send(
            question_owner_email,
            NotificationEvent.NEW_ANSWER,
            {
                "userName": answerer_name,
                "questionTitle": question_title,
                "questionId": str(question_id),
                "answerId": str(answer_id),
            },
        )

    async def send_reply_notification(
        self,
        target_email: Email,
        replier_name: str,
        question_id: QuestionId,
        answer_id: AnswerId,
        is_question_owner: bool,
    ) -> NotificationResult:
        """Tell an answer's author that someone replied to it."""
        return await self.send(
            target_email,
            NotificationEvent.NEW_REPLY,
            {
                "userName": replier_name,
                "questionId": str(question_id),
                "answerId": str(answer_id),
                "isQuestionOwner": is_question_owner,
            },
        )
