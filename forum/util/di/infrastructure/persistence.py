"""Persistence component providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import Settings
from forum.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from forum.persistence.database import create_engine, create_session_factory
from forum.persistence.repository import (
    PostgresAnswerRepository,
    PostgresQuestionRepository,
    PostgresTagRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories behind the domain's repository interfaces."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Postgres repositories sharing one session per request.

    The session commits when the request finishes and rolls back if it
    raised, so a vote and everything else written in the same request
    land together or not at all.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn("Request rolled back", error=str(e))
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        return PostgresTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, session: AsyncSession) -> AnswerRepository:
        return PostgresAnswerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)
