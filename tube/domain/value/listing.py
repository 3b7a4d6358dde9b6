"""Listing parameters.

Query strings arrive loosely typed; the helpers here turn them into a
validated, immutable query before any repository is touched.
"""

import re

from pydantic import Field

from tube.domain.error import InvalidPaginationError, InvalidSortFieldError
from tube.domain.value.common import ValueObject
from tube.domain.value.identifiers import UserId
from tube.domain.value.types import SortDirection, VideoSortField

_INTEGER = re.compile(r"^[+-]?[0-9]+$")


class Pagination(ValueObject):
    """1-based page number and page size."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        """Rows to skip before the page starts."""
        return (self.page - 1) * self.limit


class VideoListingQuery(ValueObject):
    """Normalized video listing query.

    Stages applied by repositories, in order:
    1. match the owning user by lower-cased username and email
    2. join the videos owned by that user
    3. one row per video
    4. optional title substring filter and owner filter
    5. sort by ``sort_field`` / ``sort_direction`` (missing values lowest)
    6. skip ``pagination.offset`` rows
    7. take ``pagination.limit`` rows
    """

    username: str
    email: str
    pagination: Pagination = Pagination()
    text_query: str | None = None
    sort_field: VideoSortField = VideoSortField.CREATED_AT
    sort_direction: SortDirection = SortDirection.DESC
    owner_filter: UserId | None = None

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def limit(self) -> int:
        return self.pagination.limit

    @property
    def offset(self) -> int:
        return self.pagination.offset


def _parse_positive_int(value: str | int | None, name: str, default: int) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        raise InvalidPaginationError(f"{name} must be a number")
    if isinstance(value, int):
        parsed = value
    else:
        text = value.strip()
        if not _INTEGER.match(text):
            raise InvalidPaginationError(f"{name} must be a number")
        parsed = int(text)
    if parsed < 1:
        raise InvalidPaginationError(f"{name} must be greater than 0")
    return parsed


def parse_pagination(
    page: str | int | None,
    limit: str | int | None,
    default_limit: int,
    max_limit: int,
) -> Pagination:
    """Parse raw page/limit parameters.

    Missing values fall back to page 1 and ``default_limit``.

    Raises:
        InvalidPaginationError: If a value is non-numeric, below 1, or the
            limit exceeds ``max_limit``
    """
    parsed_page = _parse_positive_int(page, "Page", 1)
    parsed_limit = _parse_positive_int(limit, "Limit", default_limit)
    if parsed_limit > max_limit:
        raise InvalidPaginationError(f"Limit must not exceed {max_limit}")
    return Pagination(page=parsed_page, limit=parsed_limit)


def parse_sort_field(value: str | None) -> VideoSortField:
    """Resolve the ``sortBy`` parameter, defaulting to creation time.

    Raises:
        InvalidSortFieldError: If the field is not sortable
    """
    if value is None or not value.strip():
        return VideoSortField.CREATED_AT
    try:
        return VideoSortField(value.strip())
    except ValueError:
        raise InvalidSortFieldError(value, [f.value for f in VideoSortField])
