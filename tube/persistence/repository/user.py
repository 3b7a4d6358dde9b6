"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tube.domain.model import User
from tube.domain.repository import UserRepository
from tube.domain.value import UserId
from tube.persistence.database import translate_store_errors
from tube.persistence.mappers import row_to_user, user_to_dict
from tube.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        with translate_store_errors("user.find_by_id"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_username_and_email(
        self, username: str, email: str
    ) -> Optional[User]:
        """Find the user matching both username and email, ignoring case."""
        stmt = (
            select(users_table)
            .where(func.lower(users_table.c.username) == username.lower())
            .where(func.lower(users_table.c.email) == email.lower())
        )
        with translate_store_errors("user.find_by_username_and_email"):
            result = await self.session.execute(stmt)
            row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        values = user_to_dict(user)
        stmt = (
            insert(users_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
        )
        with translate_store_errors("user.save"):
            await self.session.execute(stmt)
            await self.session.flush()
        return user
