"""List liked videos use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase, require_actor
from tube.application.usecase.items import VideoItem
from tube.domain.service import VideoService


class ListLikedVideosRequest(BaseModel):
    """List liked videos request."""

    user_id: str | None  # Caller ID from the auth token


class ListLikedVideosResponse(BaseModel):
    """List liked videos response."""

    videos: list[VideoItem]


class ListLikedVideosUseCase(BaseUseCase):
    """Use case for listing the videos the caller has liked."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: ListLikedVideosRequest) -> ListLikedVideosResponse:
        user_id = require_actor(request.user_id)
        videos = await self.video_service.list_liked_videos(user_id)
        return ListLikedVideosResponse(
            videos=[VideoItem.from_domain(v) for v in videos]
        )
