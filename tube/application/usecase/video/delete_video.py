"""Delete video use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase, require_actor
from tube.domain.service import VideoService
from tube.domain.value import VideoId, validate_identifier


class DeleteVideoRequest(BaseModel):
    """Delete video request."""

    video_id: str | None
    user_id: str | None  # Caller ID from the auth token


class DeleteVideoUseCase(BaseUseCase):
    """Use case for deleting a video. Only its owner may delete it."""

    def __init__(self, video_service: VideoService) -> None:
        self.video_service = video_service

    async def execute(self, request: DeleteVideoRequest) -> None:
        video_id = VideoId(validate_identifier(request.video_id, "Video ID"))
        actor_id = require_actor(request.user_id)
        await self.video_service.delete_video(video_id, actor_id)
