"""Toggle like use case."""

import logfire
from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase, require_actor
from tube.application.usecase.items import LikeableItem, likeable_item
from tube.domain.service import LikeService
from tube.domain.value import LikeableKind, validate_identifier


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    kind: LikeableKind
    entity_id: str | None  # Raw ID from the path
    user_id: str | None  # Caller ID from the auth token


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    kind: LikeableKind
    liked: bool  # True if the caller likes the entity after the toggle
    entity: LikeableItem


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a video, comment or tweet."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Steps:
        1. Validate the entity ID
        2. Resolve and validate the caller ID
        3. Toggle via the like service

        Args:
            request: Toggle like request

        Returns:
            The updated entity and the caller's like state

        Raises:
            MissingFieldError: If the entity ID is missing
            InvalidIdentifierError: If an ID is malformed
            MissingActorError: If no caller identity was supplied
            NotFoundError: If the entity doesn't exist
            ConflictError: If concurrent writers kept winning
        """
        with logfire.span("toggle_like.execute", kind=request.kind.value):
            entity_id = validate_identifier(
                request.entity_id, f"{request.kind.label} ID"
            )
            user_id = require_actor(request.user_id)

            result = await self.like_service.toggle_like(
                request.kind, entity_id, user_id
            )
            return ToggleLikeResponse(
                kind=request.kind,
                liked=result.liked,
                entity=likeable_item(result.entity),
            )
