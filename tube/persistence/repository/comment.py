"""PostgreSQL implementation of Comment repository."""

from typing import List

from sqlalchemy import desc, func, select

from tube.domain.model import Comment
from tube.domain.repository import CommentRepository
from tube.domain.value import VideoId
from tube.persistence.database import translate_store_errors
from tube.persistence.mappers import comment_to_dict, row_to_comment
from tube.persistence.repository.likeable import PostgresLikeableRepository
from tube.persistence.tables import comments_table


class PostgresCommentRepository(
    PostgresLikeableRepository[Comment], CommentRepository
):
    """PostgreSQL implementation of CommentRepository."""

    table = comments_table
    name = "comment"
    row_to_entity = staticmethod(row_to_comment)
    entity_to_dict = staticmethod(comment_to_dict)

    async def find_by_video(
        self, video_id: VideoId, limit: int = 10, offset: int = 0
    ) -> List[Comment]:
        """Find comments on a video, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.video_id == video_id)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        with translate_store_errors("comment.find_by_video"):
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_video(self, video_id: VideoId) -> int:
        """Count comments on a video."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.video_id == video_id)
        )
        with translate_store_errors("comment.count_by_video"):
            result = await self.session.execute(stmt)
            return result.scalar() or 0
