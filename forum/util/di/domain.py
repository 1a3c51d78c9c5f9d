"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings, NotificationSettings
from forum.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from forum.domain.service import (
    AnswerService,
    JWTService,
    NotificationPublisher,
    NotificationService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository, tag_service=tag_service
        )

    @provide
    def get_answer_service(self, answer_repository: AnswerRepository) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(answer_repository=answer_repository)

    @provide
    def get_notification_service(
        self, publisher: NotificationPublisher, settings: NotificationSettings
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(publisher=publisher, settings=settings)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        answer_repository: AnswerRepository,
        notification_service: NotificationService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            answer_repository=answer_repository,
            notification_service=notification_service,
        )
