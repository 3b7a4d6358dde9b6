"""Update video use case."""

from pydantic import BaseModel

from tube.application.usecase.base import (
    BaseUseCase,
    optional_text,
    require_actor,
)
from tube.application.usecase.items import VideoItem
from tube.domain.error import MissingFieldError
from tube.domain.service import VideoService
from tube.domain.value import VideoId, validate_identifier


class UpdateVideoRequest(BaseModel):
    """Update video request. Omitted fields are left unchanged."""

    video_id: str | None
    user_id: str | None  # Caller ID from the auth token
    title: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None


class UpdateVideoUseCase(BaseUseCase):
    """Use case for editing a video's details."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: UpdateVideoRequest) -> VideoItem:
        """Execute update video flow.

        Raises:
            InvalidIdentifierError: If the video ID is malformed
            MissingActorError: If no caller identity was supplied
            MissingFieldError: If no field is given or a given field is blank
            NotAuthorizedError: If the caller doesn't own the video
            NotFoundError: If the video doesn't exist
        """
        video_id = VideoId(validate_identifier(request.video_id, "Video ID"))
        actor_id = require_actor(request.user_id)

        title = optional_text(request.title, "Title")
        description = optional_text(request.description, "Description")
        thumbnail_url = optional_text(request.thumbnail_url, "Thumbnail")
        if title is None and description is None and thumbnail_url is None:
            raise MissingFieldError("At least one field")

        video = await self.video_service.update_video(
            video_id,
            actor_id,
            title=title,
            description=description,
            thumbnail_url=thumbnail_url,
        )
        return VideoItem.from_domain(video)
