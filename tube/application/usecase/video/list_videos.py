"""List channel videos use case."""

import logfire
from pydantic import BaseModel, ValidationError

from tube.application.usecase.base import BaseUseCase, require_text
from tube.application.usecase.items import Page, VideoItem
from tube.config import ListingSettings
from tube.domain.error import InvalidFieldError
from tube.domain.service import VideoService
from tube.domain.value import (
    Email,
    SortDirection,
    UserId,
    VideoListingQuery,
    parse_pagination,
    parse_sort_field,
    validate_identifier,
)


class ListVideosRequest(BaseModel):
    """List videos request.

    Values are passed through as received from the query string and
    normalized by the use case.
    """

    username: str | None
    email: str | None
    page: str | None = None
    limit: str | None = None
    query: str | None = None  # Title substring
    sort_by: str | None = None
    sort_type: str | None = None  # "asc" or anything else for descending
    user_id: str | None = None  # Optional owner filter


class ListVideosUseCase(BaseUseCase):
    """Use case for the paginated, filtered, sorted channel listing."""

    def __init__(
        self, video_service: VideoService, listing_settings: ListingSettings
    ) -> None:
        """Initialize list videos use case.

        Args:
            video_service: Video domain service
            listing_settings: Page size defaults and bounds
        """
        self.video_service = video_service
        self.listing_settings = listing_settings

    def build_query(self, request: ListVideosRequest) -> VideoListingQuery:
        """Normalize raw request parameters into a listing query.

        Raises:
            MissingFieldError: If username or email is missing
            InvalidFieldError: If email is not an email address
            InvalidPaginationError: If page or limit is invalid
            InvalidSortFieldError: If sort_by is not sortable
            InvalidIdentifierError: If user_id is malformed
        """
        username = require_text(request.username, "Username").lower()
        email = require_text(request.email, "Email")
        try:
            email = Email(email).root
        except ValidationError:
            raise InvalidFieldError("Email", email)
        pagination = parse_pagination(
            request.page,
            request.limit,
            default_limit=self.listing_settings.default_limit,
            max_limit=self.listing_settings.max_limit,
        )
        sort_field = parse_sort_field(request.sort_by)
        text_query = request.query.strip() if request.query else None

        owner_filter = None
        if request.user_id is not None and request.user_id.strip():
            owner_filter = UserId(validate_identifier(request.user_id, "User ID"))

        return VideoListingQuery(
            username=username,
            email=email,
            pagination=pagination,
            text_query=text_query or None,
            sort_field=sort_field,
            sort_direction=SortDirection.from_param(request.sort_type),
            owner_filter=owner_filter,
        )

    async def execute(self, request: ListVideosRequest) -> Page[VideoItem]:
        """Execute list videos flow.

        Args:
            request: List videos request

        Returns:
            One page of videos; an empty page when nothing matches
        """
        with logfire.span(
            "list_videos.execute",
            username=request.username,
            page=request.page,
            limit=request.limit,
            sort_by=request.sort_by,
            sort_type=request.sort_type,
        ):
            query = self.build_query(request)
            videos, total = await self.video_service.list_videos(query)
            return Page[VideoItem](
                items=[VideoItem.from_domain(v) for v in videos],
                page=query.page,
                limit=query.limit,
                total=total,
            )
