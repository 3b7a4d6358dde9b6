"""Strongly typed identifiers for domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

import re
from typing import NewType
from uuid import UUID

from tube.domain.error import InvalidIdentifierError, MissingFieldError

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
VideoId = NewType("VideoId", UUID)
CommentId = NewType("CommentId", UUID)
TweetId = NewType("TweetId", UUID)

# Canonical textual form: 8-4-4-4-12 hex digits
_CANONICAL_ID = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def validate_identifier(value: object, field: str = "ID") -> UUID:
    """Validate a caller-supplied identifier.

    Only the canonical hyphenated form is accepted. Braced, URN or bare-hex
    spellings that ``uuid.UUID`` would also parse are rejected so that every
    ID has exactly one wire representation.

    Args:
        value: Raw value from the request (path, query or token claim)
        field: Human-readable field name used in error messages

    Returns:
        The parsed UUID

    Raises:
        MissingFieldError: If the value is missing or blank
        InvalidIdentifierError: If the value is not a canonical UUID string
    """
    if isinstance(value, UUID):
        return value

    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingFieldError(field)

    if not isinstance(value, str) or not _CANONICAL_ID.match(value.strip()):
        raise InvalidIdentifierError(field, value)

    return UUID(value.strip())
