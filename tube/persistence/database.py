"""Database connection, session management and store error translation."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tube.config import Settings
from tube.domain.error import StoreUnavailableError


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL and pool sizes

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Re-raise driver and SQL errors as :class:`StoreUnavailableError`.

    The original exception is logged and chained; its message never leaves
    the persistence layer.

    Args:
        operation: Repository operation name, for logging
    """
    try:
        yield
    except SQLAlchemyError as e:
        logfire.error(
            "Store operation failed",
            operation=operation,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise StoreUnavailableError(operation) from e
