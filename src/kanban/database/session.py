from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)

from ..config.settings import Settings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores FOREIGN KEY clauses unless the pragma is on per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(settings: Settings, url: str | None = None, **kwargs) -> AsyncEngine:
    """
    Create the AsyncEngine for `url` (defaults to settings.DATABASE_URL).

    Extra keyword arguments are passed through to `create_async_engine`, which
    lets tests pass `poolclass=StaticPool` for in-memory SQLite.
    """
    engine = create_async_engine(
        url or settings.DATABASE_URL,
        echo=settings.SQLALCHEMY_ECHO,
        pool_pre_ping=settings.DB_POOL_PRE_PING,
        **kwargs,
    )
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False keeps records readable after @transactional commits
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_async_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency. Yields one session per request and closes it afterwards.

    The session factory lives on `app.state.sessionmaker` (set up by `create_app`).

    Usage:
        async def endpoint(session: AsyncSession = Depends(get_async_session)):
            await session.execute(...)
    """
    maker: async_sessionmaker[AsyncSession] = request.app.state.sessionmaker
    async with maker() as session:
        yield session
