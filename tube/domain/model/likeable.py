"""Shared base for entities users can like.

Videos, comments and tweets all carry the same ``likes`` collection and the
same toggle policy, so the policy lives here once.
"""

from datetime import datetime
from typing import Self
from uuid import UUID

from pydantic import Field, field_validator

from tube.domain.model.common import DomainModel
from tube.domain.value import UserId


class LikeableModel(DomainModel):
    """Entity carrying a set of user IDs that liked it.

    ``likes`` keeps insertion order but has set semantics: each user ID
    appears at most once. ``version`` is the optimistic-concurrency stamp
    read together with the entity; repositories only accept a write whose
    ``version`` still matches the stored one.
    """

    id: UUID
    likes: tuple[UserId, ...] = ()
    version: int = Field(default=1, ge=1)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("likes", mode="after")
    @classmethod
    def deduplicate_likes(cls, v: tuple[UserId, ...]) -> tuple[UserId, ...]:
        """Drop repeated user IDs, keeping the first occurrence."""
        return tuple(dict.fromkeys(v))

    @property
    def likes_count(self) -> int:
        return len(self.likes)

    def is_liked_by(self, user_id: UserId) -> bool:
        """Check membership by UUID equality."""
        return user_id in self.likes

    def revise(self, **changes: object) -> Self:
        """Return a re-validated copy with ``changes`` applied and a fresh ``updated_at``."""
        data = self.model_dump()
        data.update(changes)
        data["updated_at"] = datetime.now()
        return type(self).model_validate(data)

    def toggle_like(self, user_id: UserId) -> Self:
        """Return a copy with ``user_id`` removed if present, appended otherwise."""
        if self.is_liked_by(user_id):
            likes = tuple(liker for liker in self.likes if liker != user_id)
        else:
            likes = self.likes + (user_id,)
        return self.model_copy(update={"likes": likes, "updated_at": datetime.now()})
