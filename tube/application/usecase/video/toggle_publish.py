"""Toggle publish status use case."""

import logfire
from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase
from tube.application.usecase.items import VideoItem
from tube.domain.service import VideoService
from tube.domain.value import VideoId, validate_identifier


class TogglePublishRequest(BaseModel):
    """Toggle publish request."""

    video_id: str | None


class TogglePublishUseCase(BaseUseCase):
    """Use case for flipping a video between published and unpublished."""

    def __init__(self, video_service: VideoService) -> None:
        """Initialize toggle publish use case.

        Args:
            video_service: Video domain service
        """
        self.video_service = video_service

    async def execute(self, request: TogglePublishRequest) -> VideoItem:
        """Execute toggle publish flow.

        Raises:
            MissingFieldError: If the video ID is missing
            InvalidIdentifierError: If the video ID is malformed
            NotFoundError: If the video doesn't exist
        """
        with logfire.span("toggle_publish.execute", video_id=request.video_id):
            video_id = VideoId(validate_identifier(request.video_id, "Video ID"))
            video = await self.video_service.toggle_publish(video_id)
            return VideoItem.from_domain(video)
