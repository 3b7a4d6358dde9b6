"""Comment repository interface."""

from abc import abstractmethod
from typing import List

from tube.domain.model.comment import Comment
from tube.domain.repository.likeable import LikeableRepository
from tube.domain.value import VideoId


class CommentRepository(LikeableRepository[Comment]):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_video(
        self, video_id: VideoId, limit: int = 10, offset: int = 0
    ) -> List[Comment]:
        """Find comments on a video, newest first.

        Args:
            video_id: The video's ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Comments on the requested page
        """
        pass

    @abstractmethod
    async def count_by_video(self, video_id: VideoId) -> int:
        """Count comments on a video."""
        pass
