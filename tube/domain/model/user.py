"""User aggregate root.

Accounts are created by the external identity service; this API reads them
to resolve channel owners and to check that authors exist.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tube.domain.model.common import DomainModel
from tube.domain.value import Email, UserId, Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    email: Email
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
