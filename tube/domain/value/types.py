"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from tube.domain.value.common import RootValueObject


class LikeableKind(str, Enum):
    """Type of entity that can be liked."""

    VIDEO = "video"
    COMMENT = "comment"
    TWEET = "tweet"

    @property
    def label(self) -> str:
        """Display name used in messages (e.g. "Video not found")."""
        return self.value.capitalize()


class SortDirection(str, Enum):
    """Direction of a listing sort."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_param(cls, value: str | None) -> "SortDirection":
        """Only the exact value "asc" sorts ascending; anything else descends."""
        return cls.ASC if value == cls.ASC.value else cls.DESC


class VideoSortField(str, Enum):
    """Fields a video listing can be sorted by (API spelling)."""

    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    TITLE = "title"
    VIEWS = "views"
    DURATION = "duration"

    @property
    def attribute(self) -> str:
        """Name of the model attribute / table column."""
        return {
            VideoSortField.CREATED_AT: "created_at",
            VideoSortField.UPDATED_AT: "updated_at",
            VideoSortField.TITLE: "title",
            VideoSortField.VIEWS: "views",
            VideoSortField.DURATION: "duration",
        }[self]


class Username(RootValueObject[str]):
    """Channel username, stored and matched lower-case."""

    @field_validator("root")
    @classmethod
    def normalize_username(cls, v: str) -> str:
        """Lower-case and validate length."""
        v = v.strip().lower()
        if len(v) < 1 or len(v) > 64:
            raise ValueError("Username must be 1-64 characters")
        return v


class Email(RootValueObject[str]):
    """Email address, stored and matched lower-case."""

    @field_validator("root")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Lower-case and check the basic shape."""
        v = v.strip().lower()
        if "@" not in v or len(v) > 255:
            raise ValueError("Email must contain '@' and be at most 255 characters")
        return v
