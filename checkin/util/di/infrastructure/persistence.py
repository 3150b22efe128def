"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from checkin.config import Settings
from checkin.domain.repository import (
    ApiLogRepository,
    FollowRepository,
    StatusRepository,
    StatusTagRepository,
    UserAgentRepository,
    UserRepository,
)
from checkin.persistence.database import create_engine, create_session_factory
from checkin.persistence.repository import (
    PostgresApiLogRepository,
    PostgresFollowRepository,
    PostgresStatusRepository,
    PostgresStatusTagRepository,
    PostgresUserAgentRepository,
    PostgresUserRepository,
)
from checkin.util.di.base import ProviderBase
from checkin.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, session: AsyncSession) -> FollowRepository:
        """Provide Follow repository."""
        return PostgresFollowRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_status_repository(self, session: AsyncSession) -> StatusRepository:
        """Provide Status repository."""
        return PostgresStatusRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_status_tag_repository(self, session: AsyncSession) -> StatusTagRepository:
        """Provide StatusTag repository."""
        return PostgresStatusTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_agent_repository(self, session: AsyncSession) -> UserAgentRepository:
        """Provide UserAgent repository."""
        return PostgresUserAgentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_api_log_repository(self, session: AsyncSession) -> ApiLogRepository:
        """Provide ApiLog repository."""
        return PostgresApiLogRepository(session)
