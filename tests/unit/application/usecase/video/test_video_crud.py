"""Unit tests for the single-video use cases."""

from uuid import uuid4

import pytest

from tests.factories import make_user, make_video
from tests.harness import create_env_fixture
from tube.application.usecase.video import (
    CreateVideoRequest,
    CreateVideoUseCase,
    DeleteVideoRequest,
    DeleteVideoUseCase,
    GetVideoRequest,
    GetVideoUseCase,
    TogglePublishRequest,
    TogglePublishUseCase,
    UpdateVideoRequest,
    UpdateVideoUseCase,
)
from tube.domain.error import (
    InvalidIdentifierError,
    MissingActorError,
    MissingFieldError,
    NotAuthorizedError,
    NotFoundError,
)
from tube.domain.repository import UserRepository, VideoRepository
from tube.domain.value import UserId

unit_env = create_env_fixture()


class TestCreateVideoUseCase:
    """Unit tests for CreateVideoUseCase."""

    @pytest.mark.asyncio
    async def test_creates_unpublished_video(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateVideoUseCase)
        user_repo = await unit_env.get(UserRepository)
        owner = await user_repo.save(make_user())

        # Act
        item = await use_case.execute(
            CreateVideoRequest(
                user_id=str(owner.id),
                title="  Photosynthesis  ",
                description="Light to sugar",
                media_url="https://cdn.example.com/p.mp4",
                thumbnail_url="https://cdn.example.com/p.jpg",
                duration=95,
            )
        )

        # Assert
        assert item.title == "Photosynthesis"
        assert item.owner_id == str(owner.id)
        assert item.is_published is False
        assert item.views == 0
        assert item.likes_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("missing", "field"),
        [
            ("title", "Title"),
            ("description", "Description"),
            ("media_url", "Video file"),
            ("thumbnail_url", "Thumbnail"),
        ],
    )
    async def test_required_fields(self, unit_env, missing, field):
        use_case = await unit_env.get(CreateVideoUseCase)
        values = {
            "title": "T",
            "description": "D",
            "media_url": "https://cdn.example.com/x.mp4",
            "thumbnail_url": "https://cdn.example.com/x.jpg",
        }
        values[missing] = "   "

        with pytest.raises(MissingFieldError) as exc_info:
            await use_case.execute(CreateVideoRequest(user_id=str(uuid4()), **values))

        assert str(exc_info.value) == f"{field} is required"

    @pytest.mark.asyncio
    async def test_requires_actor(self, unit_env):
        use_case = await unit_env.get(CreateVideoUseCase)

        with pytest.raises(MissingActorError):
            await use_case.execute(CreateVideoRequest(user_id=None, title="T"))


class TestGetVideoUseCase:
    """Unit tests for GetVideoUseCase."""

    @pytest.mark.asyncio
    async def test_get_video(self, unit_env):
        use_case = await unit_env.get(GetVideoUseCase)
        video_repo = await unit_env.get(VideoRepository)
        video = await video_repo.save(make_video(UserId(uuid4())))

        item = await use_case.execute(GetVideoRequest(video_id=str(video.id)))

        assert item.id == str(video.id)

    @pytest.mark.asyncio
    async def test_malformed_id(self, unit_env):
        use_case = await unit_env.get(GetVideoUseCase)

        with pytest.raises(InvalidIdentifierError):
            await use_case.execute(GetVideoRequest(video_id="abc"))


class TestTogglePublishUseCase:
    """Unit tests for TogglePublishUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_twice(self, unit_env):
        use_case = await unit_env.get(TogglePublishUseCase)
        video_repo = await unit_env.get(VideoRepository)
        video = await video_repo.save(make_video(UserId(uuid4())))
        request = TogglePublishRequest(video_id=str(video.id))

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first.is_published is True
        assert second.is_published is False

    @pytest.mark.asyncio
    async def test_missing_video(self, unit_env):
        use_case = await unit_env.get(TogglePublishUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(TogglePublishRequest(video_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_blank_id(self, unit_env):
        use_case = await unit_env.get(TogglePublishUseCase)

        with pytest.raises(MissingFieldError):
            await use_case.execute(TogglePublishRequest(video_id=None))


class TestUpdateVideoUseCase:
    """Unit tests for UpdateVideoUseCase."""

    @pytest.mark.asyncio
    async def test_updates_given_fields_only(self, unit_env):
        use_case = await unit_env.get(UpdateVideoUseCase)
        video_repo = await unit_env.get(VideoRepository)
        owner_id = UserId(uuid4())
        video = await video_repo.save(make_video(owner_id, title="Old"))

        item = await use_case.execute(
            UpdateVideoRequest(
                video_id=str(video.id), user_id=str(owner_id), description="New text"
            )
        )

        assert item.title == "Old"
        assert item.description == "New text"

    @pytest.mark.asyncio
    async def test_requires_at_least_one_field(self, unit_env):
        use_case = await unit_env.get(UpdateVideoUseCase)

        with pytest.raises(MissingFieldError):
            await use_case.execute(
                UpdateVideoRequest(video_id=str(uuid4()), user_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_non_owner_rejected(self, unit_env):
        use_case = await unit_env.get(UpdateVideoUseCase)
        video_repo = await unit_env.get(VideoRepository)
        video = await video_repo.save(make_video(UserId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateVideoRequest(
                    video_id=str(video.id), user_id=str(uuid4()), title="Mine"
                )
            )


class TestDeleteVideoUseCase:
    """Unit tests for DeleteVideoUseCase."""

    @pytest.mark.asyncio
    async def test_owner_deletes(self, unit_env):
        use_case = await unit_env.get(DeleteVideoUseCase)
        video_repo = await unit_env.get(VideoRepository)
        owner_id = UserId(uuid4())
        video = await video_repo.save(make_video(owner_id))

        await use_case.execute(
            DeleteVideoRequest(video_id=str(video.id), user_id=str(owner_id))
        )

        assert await video_repo.find_by_id(video.id) is None

    @pytest.mark.asyncio
    async def test_requires_actor(self, unit_env):
        use_case = await unit_env.get(DeleteVideoUseCase)

        with pytest.raises(MissingActorError):
            await use_case.execute(DeleteVideoRequest(video_id=str(uuid4()), user_id=""))
