from __future__ import annotations

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import ReadOnlyUnitOfWork
from src.infrastructure.repos.breeding_events_sqlalchemy import (
    BreedingEventsSQLAlchemyRepository,
)


def create_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=echo)
    return create_async_engine(database_url, echo=echo, pool_pre_ping=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


class SQLAlchemyUnitOfWork(ReadOnlyUnitOfWork):
    """One session per request; the transaction is always rolled back on exit."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.breeding_events: BreedingEventsSQLAlchemyRepository | None = None

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        self.session = self._session_factory()
        self.breeding_events = BreedingEventsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session is None:
            return
        try:
            await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self.breeding_events = None
