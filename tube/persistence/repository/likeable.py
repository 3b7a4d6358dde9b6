"""Shared PostgreSQL implementation for likeable entity tables."""

from typing import Any, Callable, Dict, Generic, Optional, TypeVar
from uuid import UUID

import logfire
from sqlalchemy import Table, select
from sqlalchemy.ext.asyncio import AsyncSession

from tube.domain.model.likeable import LikeableModel
from tube.persistence.database import translate_store_errors

T = TypeVar("T", bound=LikeableModel)


class PostgresLikeableRepository(Generic[T]):
    """CRUD plus version-checked replace over one likeable table.

    Subclasses set ``table``, ``name`` and the two mappers (as staticmethods),
    and mix in the matching domain repository interface.
    """

    table: Table
    name: str
    row_to_entity: Callable[[Dict[str, Any]], T]
    entity_to_dict: Callable[[T], Dict[str, Any]]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, entity_id: UUID) -> Optional[T]:
        """Find an entity by ID."""
        with logfire.span(f"{self.name}_repository.find_by_id", id=str(entity_id)):
            with translate_store_errors(f"{self.name}.find_by_id"):
                stmt = select(self.table).where(self.table.c.id == entity_id)
                result = await self.session.execute(stmt)
                row = result.fetchone()
            return self.row_to_entity(row._asdict()) if row else None

    async def save(self, entity: T) -> T:
        """Insert a new entity."""
        with logfire.span(f"{self.name}_repository.save", id=str(entity.id)):
            with translate_store_errors(f"{self.name}.save"):
                stmt = (
                    self.table.insert()
                    .values(**self.entity_to_dict(entity))
                    .returning(self.table)
                )
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()
            return self.row_to_entity(row._asdict())

    async def replace(self, entity: T) -> Optional[T]:
        """Write the entity only if the stored version still matches.

        The version column is bumped in the same statement, so two writers
        that read the same version cannot both succeed.
        """
        with logfire.span(
            f"{self.name}_repository.replace",
            id=str(entity.id),
            expected_version=entity.version,
        ):
            values = self.entity_to_dict(entity)
            values.pop("id")
            values.pop("created_at")
            values["version"] = self.table.c.version + 1

            with translate_store_errors(f"{self.name}.replace"):
                stmt = (
                    self.table.update()
                    .where(self.table.c.id == entity.id)
                    .where(self.table.c.version == entity.version)
                    .values(**values)
                    .returning(self.table)
                )
                result = await self.session.execute(stmt)
                row = result.fetchone()
                await self.session.flush()

            if row is None:
                logfire.warn(
                    "Version check failed",
                    table=self.table.name,
                    id=str(entity.id),
                    expected_version=entity.version,
                )
                return None
            return self.row_to_entity(row._asdict())

    async def delete(self, entity_id: UUID) -> bool:
        """Delete an entity (hard delete)."""
        with logfire.span(f"{self.name}_repository.delete", id=str(entity_id)):
            with translate_store_errors(f"{self.name}.delete"):
                stmt = (
                    self.table.delete()
                    .where(self.table.c.id == entity_id)
                    .returning(self.table.c.id)
                )
                result = await self.session.execute(stmt)
                deleted = result.fetchone() is not None
                await self.session.flush()
            return deleted
