"""List video comments use case."""

import logfire
from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase
from tube.application.usecase.items import CommentItem, Page
from tube.config import ListingSettings
from tube.domain.service import CommentService
from tube.domain.value import VideoId, parse_pagination, validate_identifier


class ListCommentsRequest(BaseModel):
    """List comments request."""

    video_id: str | None
    page: str | None = None
    limit: str | None = None


class ListCommentsUseCase(BaseUseCase):
    """Use case for paging through a video's comments, newest first."""

    def __init__(
        self, comment_service: CommentService, listing_settings: ListingSettings
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            listing_settings: Page size defaults and bounds
        """
        self.comment_service = comment_service
        self.listing_settings = listing_settings

    async def execute(self, request: ListCommentsRequest) -> Page[CommentItem]:
        """Execute list comments flow.

        Raises:
            InvalidIdentifierError: If the video ID is malformed
            InvalidPaginationError: If page or limit is invalid
            NotFoundError: If the video doesn't exist
        """
        with logfire.span("list_comments.execute", video_id=request.video_id):
            video_id = VideoId(validate_identifier(request.video_id, "Video ID"))
            pagination = parse_pagination(
                request.page,
                request.limit,
                default_limit=self.listing_settings.default_limit,
                max_limit=self.listing_settings.max_limit,
            )
            comments, total = await self.comment_service.list_video_comments(
                video_id, pagination
            )
            return Page[CommentItem](
                items=[CommentItem.from_domain(c) for c in comments],
                page=pagination.page,
                limit=pagination.limit,
                total=total,
            )
