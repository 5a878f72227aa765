"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from pinwall.config import Settings
from pinwall.domain.repository import (
    ImageRepository,
    SessionRepository,
    UserRepository,
)
from pinwall.persistence.database import create_engine, create_session_factory
from pinwall.persistence.repository import (
    PostgresImageRepository,
    PostgresUserRepository,
)
from pinwall.persistence.repository.inmemory import (
    InMemoryImageRepository,
    InMemorySessionRepository,
    InMemoryUserRepository,
)
from pinwall.util.di.base import ProviderBase
from pinwall.util.observability import instrument_sqlalchemy


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

        Repositories commit their own writes so that a change is durable
        before the response goes out. Anything left open when the request
        fails is rolled back here.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_image_repository(self, session: AsyncSession) -> ImageRepository:
        """Provide Image repository."""
        return PostgresImageRepository(session)

    @provide(scope=Scope.APP)
    def get_session_repository(self) -> SessionRepository:
        """Provide the revoked-session registry."""
        return InMemorySessionRepository()


class MemoryPersistenceProvider(PersistenceProvider):
    """Process-local persistence using in-memory repositories.

    Selected with ``STORAGE__BACKEND=memory`` and by the test container.
    Repositories are APP-scoped so data lives as long as the container;
    build a fresh container for isolation.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_image_repository(self) -> ImageRepository:
        """Provide in-memory image repository."""
        return InMemoryImageRepository()

    @provide(scope=Scope.APP)
    def get_session_repository(self) -> SessionRepository:
        """Provide in-memory revoked-session registry."""
        return InMemorySessionRepository()
