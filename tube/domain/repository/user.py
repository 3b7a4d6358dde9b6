"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tube.domain.model.user import User
from tube.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username_and_email(
        self, username: str, email: str
    ) -> Optional[User]:
        """Find the user matching both username and email (case-insensitive).

        Args:
            username: Username, any case
            email: Email address, any case

        Returns:
            The user if both match, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
