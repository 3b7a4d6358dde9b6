"""In-memory comment repository for testing."""

from tube.domain.model.comment import Comment
from tube.domain.repository.comment import CommentRepository
from tube.domain.value import VideoId

from .likeable import InMemoryLikeableRepository


class InMemoryCommentRepository(
    InMemoryLikeableRepository[Comment], CommentRepository
):
    """In-memory implementation of CommentRepository for testing."""

    async def find_by_video(
        self, video_id: VideoId, limit: int = 10, offset: int = 0
    ) -> list[Comment]:
        """Find comments on a video, newest first."""
        comments = [c for c in self._entities.values() if c.video_id == video_id]

        # Sort by created_at descending
        comments.sort(key=lambda c: (c.created_at, c.id), reverse=True)

        # Paginate
        return comments[offset : offset + limit]

    async def count_by_video(self, video_id: VideoId) -> int:
        return sum(1 for c in self._entities.values() if c.video_id == video_id)
