"""Get video use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase
from tube.application.usecase.items import VideoItem
from tube.domain.service import VideoService
from tube.domain.value import VideoId, validate_identifier


class GetVideoRequest(BaseModel):
    """Get video request."""

    video_id: str | None


class GetVideoUseCase(BaseUseCase):
    """Use case for fetching a single video."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: GetVideoRequest) -> VideoItem:
        video_id = VideoId(validate_identifier(request.video_id, "Video ID"))
        video = await self.video_service.get_video(video_id)
        return VideoItem.from_domain(video)
