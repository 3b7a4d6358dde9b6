"""Update comment use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase, require_actor, require_text
from tube.application.usecase.items import CommentItem
from tube.domain.service import CommentService
from tube.domain.value import CommentId, validate_identifier


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str | None
    user_id: str | None  # Caller ID from the auth token
    content: str | None


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment. Only the author may edit it."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        comment_id = CommentId(validate_identifier(request.comment_id, "Comment ID"))
        content = require_text(request.content, "Content")
        actor_id = require_actor(request.user_id)

        comment = await self.comment_service.update_comment(
            comment_id, actor_id, content
        )
        return CommentItem.from_domain(comment)
