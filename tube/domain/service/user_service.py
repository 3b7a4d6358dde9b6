"""User domain service."""

import logfire

from tube.domain.error import NotFoundError
from tube.domain.model import User
from tube.domain.repository import UserRepository
from tube.domain.value import UserId


class UserService:
    """Domain service for user lookups.

    Users are registered elsewhere; this service only reads them.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info(
                "User found", user_id=str(user_id), username=user.username.root
            )
            return user

    async def get_by_username_and_email(self, username: str, email: str) -> User | None:
        """Get the user matching both username and email.

        Args:
            username: Username, any case
            email: Email, any case

        Returns:
            User if found, None otherwise
        """
        with logfire.span(
            "user_service.get_by_username_and_email", username=username
        ):
            user = await self.user_repository.find_by_username_and_email(
                username, email
            )
            if user:
                logfire.info("User found", username=username, user_id=str(user.id))
            else:
                logfire.warn("User not found", username=username)
            return user
