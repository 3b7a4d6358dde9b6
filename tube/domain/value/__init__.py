"""Domain value objects."""

from tube.domain.value.identifiers import (
    CommentId,
    TweetId,
    UserId,
    VideoId,
    validate_identifier,
)
from tube.domain.value.listing import (
    Pagination,
    VideoListingQuery,
    parse_pagination,
    parse_sort_field,
)
from tube.domain.value.types import (
    Email,
    LikeableKind,
    SortDirection,
    Username,
    VideoSortField,
)

__all__ = [
    # Identifiers
    "UserId",
    "VideoId",
    "CommentId",
    "TweetId",
    "validate_identifier",
    # Types
    "LikeableKind",
    "SortDirection",
    "VideoSortField",
    "Username",
    "Email",
    # Listing
    "Pagination",
    "VideoListingQuery",
    "parse_pagination",
    "parse_sort_field",
]
