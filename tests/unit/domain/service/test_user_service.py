"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from tests.factories import make_user
from tests.harness import create_env_fixture
from tube.domain.error import NotFoundError
from tube.domain.repository import UserRepository
from tube.domain.service import UserService
from tube.domain.value import UserId

unit_env = create_env_fixture()


class TestUserService:
    """Unit tests for UserService."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("dana"))

        found = await user_service.get_by_id(user.id)

        assert found == user

    @pytest.mark.asyncio
    async def test_get_missing_user_raises(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError) as exc_info:
            await user_service.get_by_id(UserId(uuid4()))

        assert str(exc_info.value) == "User not found"

    @pytest.mark.asyncio
    async def test_lookup_ignores_case(self, unit_env):
        """Usernames and emails are matched case-insensitively."""
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user("Erin", "Erin@Example.com"))

        found = await user_service.get_by_username_and_email("ERIN", "erin@EXAMPLE.com")

        assert found == user

    @pytest.mark.asyncio
    async def test_lookup_requires_both_to_match(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("frank", "frank@example.com"))

        found = await user_service.get_by_username_and_email(
            "frank", "someone@example.com"
        )

        assert found is None
