"""Generic repository interface for likeable entities."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from uuid import UUID

from tube.domain.model.likeable import LikeableModel

T = TypeVar("T", bound=LikeableModel)


class LikeableRepository(ABC, Generic[T]):
    """Persistence contract shared by videos, comments and tweets.

    Writes to an existing entity go through :meth:`replace`, which is a
    compare-and-swap on the entity's ``version``. There is no unconditional
    update: a read-modify-write that raced with another writer must be
    detected, not silently overwrite the other change.
    """

    @abstractmethod
    async def find_by_id(self, entity_id: UUID) -> Optional[T]:
        """Find an entity by ID.

        Args:
            entity_id: The entity's unique identifier

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert a new entity.

        Args:
            entity: The entity to insert

        Returns:
            The saved entity
        """
        pass

    @abstractmethod
    async def replace(self, entity: T) -> Optional[T]:
        """Write the full entity if the stored version still matches.

        The write succeeds only when the stored row's version equals
        ``entity.version``; the stored version is then incremented.

        Args:
            entity: Updated entity carrying the version it was read at

        Returns:
            The stored entity with its new version, or None if the entity
            was changed or deleted since it was read
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: UUID) -> bool:
        """Delete an entity.

        Args:
            entity_id: The entity ID to delete

        Returns:
            True if a row was deleted, False if none existed
        """
        pass
