"""Integration test setup.

Integration tests run against the PostgreSQL named by ``DATABASE__URL``.
Missing tables are created from the table metadata; when no database is
reachable the tests are skipped.
"""

import pytest
import pytest_asyncio
from sqlalchemy.exc import SQLAlchemyError

from tube.config import Settings
from tube.persistence.database import create_engine
from tube.persistence.tables import metadata


@pytest_asyncio.fixture(autouse=True)
async def database_schema():
    """Ensure the schema exists before each integration test."""
    engine = create_engine(Settings())
    try:
        async with engine.begin() as connection:
            await connection.run_sync(metadata.create_all)
    except (OSError, SQLAlchemyError) as e:
        pytest.skip(f"PostgreSQL unavailable: {e}")
    finally:
        await engine.dispose()
    yield
