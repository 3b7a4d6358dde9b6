"""Like toggle domain service."""

from dataclasses import dataclass
from uuid import UUID

import logfire

from tube.config import ConcurrencySettings
from tube.domain.error import NotFoundError
from tube.domain.model.likeable import LikeableModel
from tube.domain.repository import LikeableRepository
from tube.domain.value import LikeableKind, UserId

from .base import Service


@dataclass
class LikeToggleResult:
    """Outcome of a like toggle: the stored entity and the caller's new state."""

    entity: LikeableModel
    liked: bool


class LikeService(Service):
    """Domain service applying the like/unlike transition to any likeable kind.

    Videos, comments and tweets share one toggle; the only per-kind piece is
    which repository to read and write.
    """

    def __init__(
        self,
        repositories: dict[LikeableKind, LikeableRepository],
        concurrency: ConcurrencySettings,
    ) -> None:
        """Initialize like service.

        Args:
            repositories: Repository for each likeable kind
            concurrency: Retry bounds for version-checked writes
        """
        self.repositories = repositories
        self.concurrency = concurrency

    def _repository_for(self, kind: LikeableKind) -> LikeableRepository:
        try:
            return self.repositories[kind]
        except KeyError:
            raise ValueError(f"No repository registered for {kind.value}")

    async def toggle_like(
        self, kind: LikeableKind, entity_id: UUID, user_id: UserId
    ) -> LikeToggleResult:
        """Add the user's like if absent, remove it if present.

        Args:
            kind: Which kind of entity is being liked
            entity_id: ID of the entity
            user_id: ID of the user toggling

        Returns:
            The stored entity and whether the user now likes it

        Raises:
            NotFoundError: If the entity doesn't exist
            ConflictError: If concurrent writers kept winning
        """
        with logfire.span(
            "like_service.toggle_like",
            kind=kind.value,
            entity_id=str(entity_id),
            user_id=str(user_id),
        ):
            repository = self._repository_for(kind)

            async def attempt() -> LikeableModel | None:
                entity = await repository.find_by_id(entity_id)
                if entity is None:
                    logfire.warn(
                        "Likeable entity not found",
                        kind=kind.value,
                        entity_id=str(entity_id),
                    )
                    raise NotFoundError(kind.label, str(entity_id))
                return await repository.replace(entity.toggle_like(user_id))

            stored = await self._write_with_retry(
                kind.label,
                str(entity_id),
                attempt,
                self.concurrency.max_write_attempts,
            )
            liked = stored.is_liked_by(user_id)
            logfire.info(
                "Like toggled",
                kind=kind.value,
                entity_id=str(entity_id),
                user_id=str(user_id),
                liked=liked,
                likes_count=stored.likes_count,
            )
            return LikeToggleResult(entity=stored, liked=liked)
