"""Shared in-memory storage for likeable entities."""

from typing import Generic, Optional, TypeVar
from uuid import UUID

from tube.domain.model.likeable import LikeableModel

T = TypeVar("T", bound=LikeableModel)


class InMemoryLikeableRepository(Generic[T]):
    """Dict-backed store with the same compare-and-swap contract as PostgreSQL.

    ``replace`` checks and writes without awaiting in between, so on a
    single event loop it is atomic just like the conditional UPDATE.
    """

    def __init__(self) -> None:
        self._entities: dict[UUID, T] = {}

    async def find_by_id(self, entity_id: UUID) -> Optional[T]:
        return self._entities.get(entity_id)

    async def save(self, entity: T) -> T:
        self._entities[entity.id] = entity
        return entity

    async def replace(self, entity: T) -> Optional[T]:
        current = self._entities.get(entity.id)
        if current is None or current.version != entity.version:
            return None
        stored = entity.model_copy(update={"version": entity.version + 1})
        self._entities[entity.id] = stored
        return stored

    async def delete(self, entity_id: UUID) -> bool:
        return self._entities.pop(entity_id, None) is not None

    def all(self) -> list[T]:
        """Every stored entity, in insertion order."""
        return list(self._entities.values())
