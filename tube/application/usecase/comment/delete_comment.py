"""Delete comment use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase, require_actor
from tube.domain.service import CommentService
from tube.domain.value import CommentId, validate_identifier


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str | None
    user_id: str | None  # Caller ID from the auth token


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment. Only the author may delete it."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        comment_id = CommentId(validate_identifier(request.comment_id, "Comment ID"))
        actor_id = require_actor(request.user_id)
        await self.comment_service.delete_comment(comment_id, actor_id)
