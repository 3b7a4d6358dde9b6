"""Video domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from tube.config import ConcurrencySettings
from tube.domain.error import NotAuthorizedError, NotFoundError
from tube.domain.model.video import Video
from tube.domain.repository import VideoRepository
from tube.domain.value import UserId, VideoId, VideoListingQuery

from .base import Service
from .user_service import UserService


class VideoService(Service):
    """Domain service for video operations."""

    def __init__(
        self,
        video_repository: VideoRepository,
        user_service: UserService,
        concurrency: ConcurrencySettings,
    ) -> None:
        """Initialize video service.

        Args:
            video_repository: Video repository
            user_service: User service, used to check owners exist
            concurrency: Retry bounds for version-checked writes
        """
        self.video_repository = video_repository
        self.user_service = user_service
        self.concurrency = concurrency

    async def get_video(self, video_id: VideoId) -> Video:
        """Get a video by ID.

        Raises:
            NotFoundError: If video not found
        """
        with logfire.span("video_service.get_video", video_id=str(video_id)):
            video = await self.video_repository.find_by_id(video_id)
            if not video:
                logfire.warn("Video not found", video_id=str(video_id))
                raise NotFoundError("Video", str(video_id))
            return video

    async def list_videos(self, query: VideoListingQuery) -> tuple[list[Video], int]:
        """Run the channel listing.

        Args:
            query: Normalized listing query

        Returns:
            Videos on the requested page and the total number of matches
        """
        with logfire.span(
            "video_service.list_videos",
            username=query.username,
            page=query.page,
            limit=query.limit,
            sort_field=query.sort_field.value,
            sort_direction=query.sort_direction.value,
        ):
            videos = await self.video_repository.find_for_listing(query)
            total = await self.video_repository.count_for_listing(query)
            logfire.info(
                "Videos listed",
                username=query.username,
                count=len(videos),
                total=total,
            )
            return videos, total

    async def create_video(
        self,
        owner_id: UserId,
        title: str,
        description: str,
        media_url: str,
        thumbnail_url: str,
        duration: float | None = None,
    ) -> Video:
        """Create an unpublished video from already uploaded media.

        Raises:
            NotFoundError: If the owner doesn't exist
        """
        with logfire.span(
            "video_service.create_video", owner_id=str(owner_id), title=title
        ):
            await self.user_service.get_by_id(owner_id)

            now = datetime.now()
            video = Video(
                id=VideoId(uuid4()),
                owner_id=owner_id,
                title=title,
                description=description,
                media_url=media_url,
                thumbnail_url=thumbnail_url,
                duration=duration,
                views=0,
                is_published=False,
                created_at=now,
                updated_at=now,
            )
            saved = await self.video_repository.save(video)
            logfire.info("Video created", video_id=str(saved.id), owner_id=str(owner_id))
            return saved

    async def toggle_publish(self, video_id: VideoId) -> Video:
        """Negate the publish flag of the stored video.

        Raises:
            NotFoundError: If video not found
            ConflictError: If concurrent writers kept winning
        """
        with logfire.span("video_service.toggle_publish", video_id=str(video_id)):

            async def attempt() -> Video | None:
                video = await self.get_video(video_id)
                return await self.video_repository.replace(video.toggle_published())

            stored = await self._write_with_retry(
                "Video", str(video_id), attempt, self.concurrency.max_write_attempts
            )
            logfire.info(
                "Video publish status toggled",
                video_id=str(video_id),
                is_published=stored.is_published,
            )
            return stored

    async def update_video(
        self,
        video_id: VideoId,
        actor_id: UserId,
        title: str | None = None,
        description: str | None = None,
        thumbnail_url: str | None = None,
    ) -> Video:
        """Update video details. Only the owner may do this.

        Raises:
            NotFoundError: If video not found
            NotAuthorizedError: If the actor doesn't own the video
            ConflictError: If concurrent writers kept winning
        """
        changes: dict[str, object] = {}
        if title is not None:
            changes["title"] = title
        if description is not None:
            changes["description"] = description
        if thumbnail_url is not None:
            changes["thumbnail_url"] = thumbnail_url

        with logfire.span(
            "video_service.update_video",
            video_id=str(video_id),
            actor_id=str(actor_id),
            fields=sorted(changes),
        ):

            async def attempt() -> Video | None:
                video = await self.get_video(video_id)
                self._ensure_owner(video, actor_id)
                return await self.video_repository.replace(video.revise(**changes))

            stored = await self._write_with_retry(
                "Video", str(video_id), attempt, self.concurrency.max_write_attempts
            )
            logfire.info("Video updated", video_id=str(video_id))
            return stored

    async def delete_video(self, video_id: VideoId, actor_id: UserId) -> None:
        """Delete a video. Only the owner may do this.

        Raises:
            NotFoundError: If video not found
            NotAuthorizedError: If the actor doesn't own the video
        """
        with logfire.span(
            "video_service.delete_video",
            video_id=str(video_id),
            actor_id=str(actor_id),
        ):
            video = await self.get_video(video_id)
            self._ensure_owner(video, actor_id)
            if not await self.video_repository.delete(video_id):
                raise NotFoundError("Video", str(video_id))
            logfire.info("Video deleted", video_id=str(video_id))

    async def list_liked_videos(self, user_id: UserId) -> list[Video]:
        """Get videos the user has liked, newest first."""
        with logfire.span("video_service.list_liked_videos", user_id=str(user_id)):
            videos = await self.video_repository.find_liked_by(user_id)
            logfire.info(
                "Liked videos retrieved", user_id=str(user_id), count=len(videos)
            )
            return videos

    @staticmethod
    def _ensure_owner(video: Video, actor_id: UserId) -> None:
        if video.owner_id != actor_id:
            logfire.warn(
                "Video modification denied",
                video_id=str(video.id),
                owner_id=str(video.owner_id),
                actor_id=str(actor_id),
            )
            raise NotAuthorizedError("Video", str(video.id), str(actor_id))
