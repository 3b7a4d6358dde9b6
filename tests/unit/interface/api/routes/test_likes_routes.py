"""API tests for like routes."""

from uuid import uuid4

import pytest

from tests.factories import (
    auth_headers,
    make_comment,
    make_tweet,
    make_user,
    make_video,
    mint_token,
)
from tube.domain.repository import (
    CommentRepository,
    TweetRepository,
    UserRepository,
    VideoRepository,
)


class TestToggleLikeRoutes:
    """API tests for PATCH /likes/{kind}/{id}."""

    @pytest.mark.asyncio
    async def test_like_then_unlike_video(self, api_env):
        """Two toggles pair up and report what happened."""
        # Arrange
        user = await (await api_env.get(UserRepository)).save(make_user())
        video = await (await api_env.get(VideoRepository)).save(
            make_video(user.id)
        )
        headers = auth_headers(user)

        # Act
        first = await api_env.client.patch(f"/likes/video/{video.id}", headers=headers)
        second = await api_env.client.patch(f"/likes/video/{video.id}", headers=headers)

        # Assert
        assert first.status_code == 200
        body = first.json()
        assert body["success"] is True
        assert body["statusCode"] == 200
        assert body["message"] == "Video liked successfully"
        assert body["data"]["likes"] == [str(user.id)]
        assert body["data"]["likesCount"] == 1
        assert second.json()["message"] == "Video unliked successfully"
        assert second.json()["data"]["likes"] == []

    @pytest.mark.asyncio
    async def test_cookie_token_identifies_caller(self, api_env):
        user = await (await api_env.get(UserRepository)).save(make_user())
        tweet = await (await api_env.get(TweetRepository)).save(make_tweet(user.id))
        token = mint_token(str(user.id), "alice")

        response = await api_env.client.patch(
            f"/likes/tweet/{tweet.id}", headers={"Cookie": f"auth_token={token}"}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Tweet liked successfully"

    @pytest.mark.asyncio
    async def test_like_comment(self, api_env):
        user = await (await api_env.get(UserRepository)).save(make_user())
        comment = await (await api_env.get(CommentRepository)).save(
            make_comment(uuid4(), user.id)
        )

        response = await api_env.client.patch(
            f"/likes/comment/{comment.id}", headers=auth_headers(user)
        )

        assert response.status_code == 200
        assert response.json()["data"]["videoId"] == str(comment.video_id)

    @pytest.mark.asyncio
    async def test_malformed_id_is_bad_request(self, api_env):
        user = make_user()

        response = await api_env.client.patch(
            "/likes/video/12345", headers=auth_headers(user)
        )

        assert response.status_code == 400
        assert response.json() == {
            "statusCode": 400,
            "message": "Invalid Video ID format",
            "success": False,
            "data": None,
        }

    @pytest.mark.asyncio
    async def test_missing_token_is_unauthorized(self, api_env):
        response = await api_env.client.patch(f"/likes/video/{uuid4()}")

        assert response.status_code == 401
        assert response.json()["message"] == "User ID is required"

    @pytest.mark.asyncio
    async def test_invalid_token_is_unauthorized(self, api_env):
        response = await api_env.client.patch(
            f"/likes/video/{uuid4()}", headers={"Authorization": "Bearer nope"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_unknown_entity_is_not_found(self, api_env):
        response = await api_env.client.patch(
            f"/likes/comment/{uuid4()}", headers=auth_headers(make_user())
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Comment not found"
        assert response.json()["success"] is False


class TestLikedVideosRoute:
    """API tests for GET /likes/videos."""

    @pytest.mark.asyncio
    async def test_lists_liked_videos(self, api_env):
        user = await (await api_env.get(UserRepository)).save(make_user())
        video = await (await api_env.get(VideoRepository)).save(
            make_video(user.id, likes=(user.id,))
        )

        response = await api_env.client.get("/likes/videos", headers=auth_headers(user))

        assert response.status_code == 200
        assert [v["id"] for v in response.json()["data"]] == [str(video.id)]
