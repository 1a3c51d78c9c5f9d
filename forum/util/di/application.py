"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.answer import CreateAnswerUseCase
from forum.application.usecase.auth import (
    GetCurrentUserUseCase,
    SignInUseCase,
    SignUpUseCase,
)
from forum.application.usecase.health import CheckDatabaseUseCase
from forum.application.usecase.question import (
    CreateQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
)
from forum.application.usecase.tag import ListTagsUseCase
from forum.application.usecase.vote import CastVoteUseCase, GetAnswerScoreUseCase
from forum.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
)
from forum.domain.service import (
    AnswerService,
    JWTService,
    NotificationService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> SignUpUseCase:
        """Provide sign-up use case."""
        return SignUpUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_signin_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> SignInUseCase:
        """Provide sign-in use case."""
        return SignInUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_question_use_case(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
        user_service: UserService,
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service,
            answer_service=answer_service,
            vote_service=vote_service,
            user_service=user_service,
        )

    # Answer use cases
    @provide(scope=Scope.REQUEST)
    def get_create_answer_use_case(
        self,
        answer_service: AnswerService,
        question_service: QuestionService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service,
            question_service=question_service,
            user_service=user_service,
            notification_service=notification_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_answer_score_use_case(
        self, vote_service: VoteService, answer_service: AnswerService
    ) -> GetAnswerScoreUseCase:
        """Provide get answer score use case."""
        return GetAnswerScoreUseCase(
            vote_service=vote_service, answer_service=answer_service
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    # Health use cases
    @provide(scope=Scope.REQUEST)
    def get_check_database_use_case(
        self,
        user_repository: UserRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        tag_repository: TagRepository,
    ) -> CheckDatabaseUseCase:
        """Provide database health check use case."""
        return CheckDatabaseUseCase(
            user_repository=user_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
            tag_repository=tag_repository,
        )
