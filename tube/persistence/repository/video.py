"""PostgreSQL implementation of Video repository."""

from typing import List

import logfire
from sqlalchemy import desc, select

from tube.domain.model import Video
from tube.domain.repository import VideoRepository
from tube.domain.value import UserId, VideoListingQuery
from tube.persistence.database import translate_store_errors
from tube.persistence.listing import build_video_listing, build_video_listing_count
from tube.persistence.mappers import row_to_video, video_to_dict
from tube.persistence.repository.likeable import PostgresLikeableRepository
from tube.persistence.tables import videos_table


class PostgresVideoRepository(PostgresLikeableRepository[Video], VideoRepository):
    """PostgreSQL implementation of VideoRepository."""

    table = videos_table
    name = "video"
    row_to_entity = staticmethod(row_to_video)
    entity_to_dict = staticmethod(video_to_dict)

    async def find_for_listing(self, query: VideoListingQuery) -> List[Video]:
        """Run the channel listing statement."""
        with logfire.span(
            "video_repository.find_for_listing",
            username=query.username,
            page=query.page,
            limit=query.limit,
        ):
            with translate_store_errors("video.find_for_listing"):
                result = await self.session.execute(build_video_listing(query))
                rows = result.fetchall()
            videos = [row_to_video(row._asdict()) for row in rows]
            if not videos:
                logfire.info("No videos found", username=query.username)
            return videos

    async def count_for_listing(self, query: VideoListingQuery) -> int:
        """Count listing matches before pagination."""
        with logfire.span(
            "video_repository.count_for_listing", username=query.username
        ):
            with translate_store_errors("video.count_for_listing"):
                result = await self.session.execute(build_video_listing_count(query))
                return result.scalar() or 0

    async def find_liked_by(self, user_id: UserId) -> List[Video]:
        """Find videos whose likes array contains the user."""
        with logfire.span("video_repository.find_liked_by", user_id=str(user_id)):
            stmt = (
                select(videos_table)
                .where(videos_table.c.likes.contains([user_id]))
                .order_by(desc(videos_table.c.created_at), desc(videos_table.c.id))
            )
            with translate_store_errors("video.find_liked_by"):
                result = await self.session.execute(stmt)
                rows = result.fetchall()
            return [row_to_video(row._asdict()) for row in rows]
