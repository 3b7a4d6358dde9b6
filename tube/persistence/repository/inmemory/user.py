"""In-memory user repository for testing."""

from typing import Optional

from tube.domain.model.user import User
from tube.domain.repository.user import UserRepository
from tube.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_username_and_email(
        self, username: str, email: str
    ) -> Optional[User]:
        """Find a user by username and email, ignoring case."""
        username, email = username.lower(), email.lower()
        for user in self._users.values():
            if user.username.root == username and user.email.root == email:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user
