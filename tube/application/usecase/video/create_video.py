"""Create video use case."""

import logfire
from pydantic import BaseModel, Field

from tube.application.usecase.base import BaseUseCase, require_actor, require_text
from tube.application.usecase.items import VideoItem
from tube.domain.service import VideoService


class CreateVideoRequest(BaseModel):
    """Create video request.

    Media is uploaded to external storage first; the request carries the
    resulting URLs.
    """

    user_id: str | None  # Caller ID from the auth token
    title: str | None = None
    description: str | None = None
    media_url: str | None = None
    thumbnail_url: str | None = None
    duration: float | None = Field(default=None, ge=0)


class CreateVideoUseCase(BaseUseCase):
    """Use case for publishing a new (initially unpublished) video."""

    def __init__(self, video_service: VideoService) -> None:
        """Initialize create video use case.

        Args:
            video_service: Video domain service
        """
        self.video_service = video_service

    async def execute(self, request: CreateVideoRequest) -> VideoItem:
        """Execute create video flow.

        Raises:
            MissingActorError: If no caller identity was supplied
            MissingFieldError: If a required field is missing or blank
            NotFoundError: If the caller's user doesn't exist
        """
        with logfire.span("create_video.execute", title=request.title):
            owner_id = require_actor(request.user_id)
            title = require_text(request.title, "Title")
            description = require_text(request.description, "Description")
            media_url = require_text(request.media_url, "Video file")
            thumbnail_url = require_text(request.thumbnail_url, "Thumbnail")

            video = await self.video_service.create_video(
                owner_id=owner_id,
                title=title,
                description=description,
                media_url=media_url,
                thumbnail_url=thumbnail_url,
                duration=request.duration,
            )
            return VideoItem.from_domain(video)
