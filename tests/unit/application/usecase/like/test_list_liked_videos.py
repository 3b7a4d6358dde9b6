"""Unit tests for ListLikedVideosUseCase."""

from uuid import uuid4

import pytest

from tests.factories import make_video
from tests.harness import create_env_fixture
from tube.application.usecase.like import (
    ListLikedVideosRequest,
    ListLikedVideosUseCase,
)
from tube.domain.error import MissingActorError
from tube.domain.repository import VideoRepository
from tube.domain.value import UserId

unit_env = create_env_fixture()


class TestListLikedVideosUseCase:
    """Unit tests for ListLikedVideosUseCase."""

    @pytest.mark.asyncio
    async def test_lists_liked_videos(self, unit_env):
        use_case = await unit_env.get(ListLikedVideosUseCase)
        video_repo = await unit_env.get(VideoRepository)
        fan = UserId(uuid4())
        liked = await video_repo.save(make_video(UserId(uuid4()), likes=(fan,)))
        await video_repo.save(make_video(UserId(uuid4())))

        response = await use_case.execute(ListLikedVideosRequest(user_id=str(fan)))

        assert [v.id for v in response.videos] == [str(liked.id)]

    @pytest.mark.asyncio
    async def test_requires_actor(self, unit_env):
        use_case = await unit_env.get(ListLikedVideosUseCase)

        with pytest.raises(MissingActorError):
            await use_case.execute(ListLikedVideosRequest(user_id=None))
