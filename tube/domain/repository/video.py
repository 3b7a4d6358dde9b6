"""Video repository interface."""

from abc import abstractmethod
from typing import List

from tube.domain.model.video import Video
from tube.domain.repository.likeable import LikeableRepository
from tube.domain.value import UserId, VideoListingQuery


class VideoRepository(LikeableRepository[Video]):
    """Repository for Video aggregate.

    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_for_listing(self, query: VideoListingQuery) -> List[Video]:
        """Run the channel listing stages and return one page of videos.

        Args:
            query: Normalized listing query (owner match, filters, sort, page)

        Returns:
            Videos on the requested page; empty if nothing matches
        """
        pass

    @abstractmethod
    async def count_for_listing(self, query: VideoListingQuery) -> int:
        """Count videos matching the listing filters, ignoring pagination.

        Args:
            query: Normalized listing query

        Returns:
            Number of matching videos
        """
        pass

    @abstractmethod
    async def find_liked_by(self, user_id: UserId) -> List[Video]:
        """Find videos whose likes contain the user, newest first.

        Args:
            user_id: The user's ID

        Returns:
            Liked videos
        """
        pass
