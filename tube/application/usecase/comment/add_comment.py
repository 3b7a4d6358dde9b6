"""Add comment use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase, require_actor, require_text
from tube.application.usecase.items import CommentItem
from tube.domain.service import CommentService
from tube.domain.value import VideoId, validate_identifier


class AddCommentRequest(BaseModel):
    """Add comment request."""

    video_id: str | None
    user_id: str | None  # Caller ID from the auth token
    content: str | None


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a video."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> CommentItem:
        """Execute add comment flow.

        Raises:
            InvalidIdentifierError: If an ID is malformed
            MissingFieldError: If the content is missing or blank
            MissingActorError: If no caller identity was supplied
            NotFoundError: If the video doesn't exist
        """
        video_id = VideoId(validate_identifier(request.video_id, "Video ID"))
        content = require_text(request.content, "Content")
        owner_id = require_actor(request.user_id)

        comment = await self.comment_service.add_comment(video_id, owner_id, content)
        return CommentItem.from_domain(comment)
