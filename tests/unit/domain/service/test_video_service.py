"""Unit tests for VideoService."""

from uuid import uuid4

import pytest

from tests.factories import make_user, make_video, minutes_ago
from tests.harness import create_env_fixture
from tube.domain.error import NotAuthorizedError, NotFoundError
from tube.domain.repository import UserRepository, VideoRepository
from tube.domain.service import VideoService
from tube.domain.value import UserId, VideoId

unit_env = create_env_fixture()


class TestVideoService:
    """Unit tests for VideoService."""

    @pytest.mark.asyncio
    async def test_create_video_starts_unpublished(self, unit_env):
        """New videos are stored unpublished with no views or likes."""
        # Arrange
        video_service = await unit_env.get(VideoService)
        user_repo = await unit_env.get(UserRepository)
        owner = await user_repo.save(make_user())

        # Act
        video = await video_service.create_video(
            owner_id=owner.id,
            title="Mitosis",
            description="How cells divide",
            media_url="https://cdn.example.com/m.mp4",
            thumbnail_url="https://cdn.example.com/m.jpg",
            duration=312.5,
        )

        # Assert
        assert video.is_published is False
        assert video.views == 0
        assert video.likes == ()
        assert video.owner_id == owner.id
        assert await video_service.get_video(video.id) == video

    @pytest.mark.asyncio
    async def test_create_video_requires_existing_owner(self, unit_env):
        video_service = await unit_env.get(VideoService)

        with pytest.raises(NotFoundError) as exc_info:
            await video_service.create_video(
                owner_id=UserId(uuid4()),
                title="Orphan",
                description="No owner",
                media_url="https://cdn.example.com/o.mp4",
                thumbnail_url="https://cdn.example.com/o.jpg",
            )

        assert exc_info.value.resource == "User"

    @pytest.mark.asyncio
    async def test_get_missing_video_raises(self, unit_env):
        video_service = await unit_env.get(VideoService)

        with pytest.raises(NotFoundError) as exc_info:
            await video_service.get_video(VideoId(uuid4()))

        assert str(exc_info.value) == "Video not found"

    @pytest.mark.asyncio
    async def test_toggle_publish_is_symmetric(self, unit_env):
        """Publishing twice returns the video to unpublished."""
        video_service = await unit_env.get(VideoService)
        video_repo = await unit_env.get(VideoRepository)
        video = await video_repo.save(make_video(UserId(uuid4())))

        published = await video_service.toggle_publish(video.id)
        unpublished = await video_service.toggle_publish(video.id)

        assert published.is_published is True
        assert unpublished.is_published is False
        assert unpublished.version == video.version + 2

    @pytest.mark.asyncio
    async def test_toggle_publish_keeps_likes(self, unit_env):
        video_service = await unit_env.get(VideoService)
        video_repo = await unit_env.get(VideoRepository)
        fan = UserId(uuid4())
        video = await video_repo.save(make_video(UserId(uuid4()), likes=(fan,)))

        published = await video_service.toggle_publish(video.id)

        assert published.likes == (fan,)

    @pytest.mark.asyncio
    async def test_toggle_publish_missing_video(self, unit_env):
        video_service = await unit_env.get(VideoService)

        with pytest.raises(NotFoundError):
            await video_service.toggle_publish(VideoId(uuid4()))

    @pytest.mark.asyncio
    async def test_owner_can_update_video(self, unit_env):
        video_service = await unit_env.get(VideoService)
        video_repo = await unit_env.get(VideoRepository)
        owner_id = UserId(uuid4())
        video = await video_repo.save(make_video(owner_id, title="Draft"))

        updated = await video_service.update_video(
            video.id, owner_id, title="Final cut"
        )

        assert updated.title == "Final cut"
        assert updated.description == video.description

    @pytest.mark.asyncio
    async def test_non_owner_cannot_update_video(self, unit_env):
        video_service = await unit_env.get(VideoService)
        video_repo = await unit_env.get(VideoRepository)
        video = await video_repo.save(make_video(UserId(uuid4()), title="Mine"))

        with pytest.raises(NotAuthorizedError):
            await video_service.update_video(
                video.id, UserId(uuid4()), title="Hijacked"
            )

        assert (await video_repo.find_by_id(video.id)).title == "Mine"

    @pytest.mark.asyncio
    async def test_owner_can_delete_video(self, unit_env):
        video_service = await unit_env.get(VideoService)
        video_repo = await unit_env.get(VideoRepository)
        owner_id = UserId(uuid4())
        video = await video_repo.save(make_video(owner_id))

        await video_service.delete_video(video.id, owner_id)

        assert await video_repo.find_by_id(video.id) is None

    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete_video(self, unit_env):
        video_service = await unit_env.get(VideoService)
        video_repo = await unit_env.get(VideoRepository)
        video = await video_repo.save(make_video(UserId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await video_service.delete_video(video.id, UserId(uuid4()))

        assert await video_repo.find_by_id(video.id) is not None

    @pytest.mark.asyncio
    async def test_list_liked_videos_newest_first(self, unit_env):
        """Only videos the user likes are returned, newest first."""
        video_service = await unit_env.get(VideoService)
        video_repo = await unit_env.get(VideoRepository)
        fan = UserId(uuid4())
        owner = UserId(uuid4())
        older = await video_repo.save(
            make_video(owner, created_at=minutes_ago(30), likes=(fan,))
        )
        newer = await video_repo.save(
            make_video(owner, created_at=minutes_ago(5), likes=(fan,))
        )
        await video_repo.save(make_video(owner, likes=(UserId(uuid4()),)))

        videos = await video_service.list_liked_videos(fan)

        assert [v.id for v in videos] == [newer.id, older.id]
