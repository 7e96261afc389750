"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from fritter.config import Settings
from fritter.domain.repository import (
    EngagementRepository,
    FreetRepository,
    ProfileRepository,
    ReflectionRepository,
)
from fritter.persistence.database import create_engine, create_session_factory
from fritter.persistence.repository import (
    PostgresEngagementRepository,
    PostgresFreetRepository,
    PostgresProfileRepository,
    PostgresReflectionRepository,
)
from fritter.util.di.base import ProviderBase
from fritter.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

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

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised. Freet creation and its
        engagement record therefore land in the same transaction.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_freet_repository(self, session: AsyncSession) -> FreetRepository:
        """Provide Freet repository."""
        return PostgresFreetRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_engagement_repository(
        self, session: AsyncSession
    ) -> EngagementRepository:
        """Provide Engagement repository."""
        return PostgresEngagementRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reflection_repository(self, session: AsyncSession) -> ReflectionRepository:
        """Provide Reflection repository."""
        return PostgresReflectionRepository(session)
