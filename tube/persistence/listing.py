"""SQL construction for the channel video listing.

The listing is one statement whose clauses follow the fixed stage order:
owner match, join to videos, filters, sort, offset, limit. Usernames and
emails are unique, so the owner subquery yields at most one row and the
join produces exactly one row per video.
"""

from sqlalchemy import ColumnElement, Select, func, select

from tube.domain.value import SortDirection, VideoListingQuery
from tube.persistence.tables import users_table, videos_table


def _matching_videos(query: VideoListingQuery, *columns) -> Select:
    owner = (
        select(users_table.c.id.label("owner_id"))
        .where(func.lower(users_table.c.username) == query.username.lower())
        .where(func.lower(users_table.c.email) == query.email.lower())
        .subquery("owner")
    )

    stmt = select(*columns).select_from(
        owner.join(videos_table, videos_table.c.owner_id == owner.c.owner_id)
    )

    if query.text_query:
        # Escapes % and _ so the query is matched literally
        stmt = stmt.where(
            videos_table.c.title.icontains(query.text_query, autoescape=True)
        )
    if query.owner_filter is not None:
        stmt = stmt.where(videos_table.c.owner_id == query.owner_filter)

    return stmt


def listing_order(query: VideoListingQuery) -> tuple[ColumnElement, ColumnElement]:
    """ORDER BY clauses: the sort column with NULLs lowest, then id."""
    column = videos_table.c[query.sort_field.attribute]
    if query.sort_direction is SortDirection.ASC:
        return column.asc().nulls_first(), videos_table.c.id.asc()
    return column.desc().nulls_last(), videos_table.c.id.desc()


def build_video_listing(query: VideoListingQuery) -> Select:
    """Build the SELECT returning one page of the channel listing."""
    return (
        _matching_videos(query, videos_table)
        .order_by(*listing_order(query))
        .offset(query.offset)
        .limit(query.limit)
    )


def build_video_listing_count(query: VideoListingQuery) -> Select:
    """Build the SELECT counting listing matches before pagination."""
    matches = _matching_videos(query, videos_table.c.id).subquery("matches")
    return select(func.count()).select_from(matches)
