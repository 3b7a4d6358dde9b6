"""In-memory video repository for testing."""

from typing import Any, Optional

from tube.domain.model.video import Video
from tube.domain.repository.user import UserRepository
from tube.domain.repository.video import VideoRepository
from tube.domain.value import SortDirection, UserId, VideoListingQuery

from .likeable import InMemoryLikeableRepository


class InMemoryVideoRepository(InMemoryLikeableRepository[Video], VideoRepository):
    """In-memory implementation of VideoRepository for testing.

    The listing runs the same stages as the SQL statement, over Python lists.
    Text sorts compare casefolded values, approximating a linguistic database
    collation; exact ordering of accented or punctuated titles follows the
    column collation in PostgreSQL and is not reproduced here.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        super().__init__()
        self.user_repository = user_repository

    async def _matching(self, query: VideoListingQuery) -> list[Video]:
        owner = await self.user_repository.find_by_username_and_email(
            query.username, query.email
        )
        if owner is None:
            return []

        videos = [v for v in self._entities.values() if v.owner_id == owner.id]

        if query.text_query:
            needle = query.text_query.lower()
            videos = [v for v in videos if needle in v.title.lower()]
        if query.owner_filter is not None:
            videos = [v for v in videos if v.owner_id == query.owner_filter]

        return videos

    async def find_for_listing(self, query: VideoListingQuery) -> list[Video]:
        """Run the listing stages and return one page."""
        videos = await self._matching(query)

        attribute = query.sort_field.attribute

        def sort_key(video: Video) -> tuple[tuple[Any, ...], Any]:
            value: Optional[Any] = getattr(video, attribute)
            if isinstance(value, str):
                value = value.casefold()
            # NULL sorts below every value
            return ((0,) if value is None else (1, value)), video.id

        videos.sort(key=sort_key, reverse=query.sort_direction is SortDirection.DESC)

        return videos[query.offset : query.offset + query.limit]

    async def count_for_listing(self, query: VideoListingQuery) -> int:
        return len(await self._matching(query))

    async def find_liked_by(self, user_id: UserId) -> list[Video]:
        videos = [v for v in self._entities.values() if v.is_liked_by(user_id)]
        videos.sort(key=lambda v: (v.created_at, v.id), reverse=True)
        return videos
