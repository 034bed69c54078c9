"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from unihub.config import Settings

APPLICATION_NAME = "unihub-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Connections identify themselves as ``unihub-api`` in pg_stat_activity
    and carry a statement timeout, so a stuck lock wait on a doubt row
    fails the request instead of pinning the connection.

    Args:
        settings: Application settings with database configuration
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_recycle=database.pool_recycle,
        connect_args={
            "server_settings": {
                "application_name": APPLICATION_NAME,
                "statement_timeout": str(database.statement_timeout_ms),
            }
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Sessions neither autoflush nor expire on commit; repositories flush
    explicitly and mapped rows stay readable after the request commits.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
