"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from tube.config import ConcurrencySettings
from tube.domain.error import NotAuthorizedError, NotFoundError
from tube.domain.model.comment import Comment
from tube.domain.repository import CommentRepository
from tube.domain.value import CommentId, Pagination, UserId, VideoId

from .base import Service
from .video_service import VideoService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        video_service: VideoService,
        concurrency: ConcurrencySettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            video_service: Video service, used to check the video exists
            concurrency: Retry bounds for version-checked writes
        """
        self.comment_repository = comment_repository
        self.video_service = video_service
        self.concurrency = concurrency

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.get_comment", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def list_video_comments(
        self, video_id: VideoId, pagination: Pagination
    ) -> tuple[list[Comment], int]:
        """Get one page of a video's comments, newest first.

        Args:
            video_id: Video ID
            pagination: Page and page size

        Returns:
            Comments on the page and the total comment count

        Raises:
            NotFoundError: If video not found
        """
        with logfire.span(
            "comment_service.list_video_comments",
            video_id=str(video_id),
            page=pagination.page,
            limit=pagination.limit,
        ):
            await self.video_service.get_video(video_id)
            comments = await self.comment_repository.find_by_video(
                video_id, limit=pagination.limit, offset=pagination.offset
            )
            total = await self.comment_repository.count_by_video(video_id)
            logfire.info(
                "Comments retrieved for video",
                video_id=str(video_id),
                count=len(comments),
                total=total,
            )
            return comments, total

    async def add_comment(
        self, video_id: VideoId, owner_id: UserId, content: str
    ) -> Comment:
        """Add a comment to a video.

        Raises:
            NotFoundError: If video not found
        """
        with logfire.span(
            "comment_service.add_comment",
            video_id=str(video_id),
            owner_id=str(owner_id),
        ):
            await self.video_service.get_video(video_id)

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                video_id=video_id,
                owner_id=owner_id,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                video_id=str(video_id),
            )
            return saved

    async def update_comment(
        self, comment_id: CommentId, actor_id: UserId, content: str
    ) -> Comment:
        """Edit a comment's content. Only the author may do this.

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If the actor didn't write the comment
            ConflictError: If concurrent writers kept winning
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):

            async def attempt() -> Comment | None:
                comment = await self.get_comment(comment_id)
                self._ensure_owner(comment, actor_id)
                return await self.comment_repository.replace(
                    comment.revise(content=content)
                )

            stored = await self._write_with_retry(
                "Comment",
                str(comment_id),
                attempt,
                self.concurrency.max_write_attempts,
            )
            logfire.info("Comment updated", comment_id=str(comment_id))
            return stored

    async def delete_comment(self, comment_id: CommentId, actor_id: UserId) -> None:
        """Delete a comment. Only the author may do this.

        Raises:
            NotFoundError: If comment not found
            NotAuthorizedError: If the actor didn't write the comment
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            comment = await self.get_comment(comment_id)
            self._ensure_owner(comment, actor_id)
            if not await self.comment_repository.delete(comment_id):
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment deleted", comment_id=str(comment_id))

    @staticmethod
    def _ensure_owner(comment: Comment, actor_id: UserId) -> None:
        if comment.owner_id != actor_id:
            logfire.warn(
                "Comment modification denied",
                comment_id=str(comment.id),
                actor_id=str(actor_id),
            )
            raise NotAuthorizedError("Comment", str(comment.id), str(actor_id))
