"""API tests for video routes."""

from uuid import uuid4

import pytest

from tests.factories import auth_headers, make_user, make_video, minutes_ago
from tube.domain.repository import UserRepository, VideoRepository


async def seed_channel(api_env, count: int):
    owner = await (await api_env.get(UserRepository)).save(
        make_user("ivan", "ivan@example.com")
    )
    video_repo = await api_env.get(VideoRepository)
    videos = [
        await video_repo.save(
            make_video(owner.id, title=f"Episode {i}", created_at=minutes_ago(i))
        )
        for i in range(count)
    ]
    return owner, videos


class TestListVideosRoute:
    """API tests for GET /videos/{username}/{email}."""

    @pytest.mark.asyncio
    async def test_page_envelope(self, api_env):
        """The page arrives in the envelope with camelCase keys."""
        # Arrange
        _, videos = await seed_channel(api_env, 12)

        # Act
        response = await api_env.client.get(
            "/videos/Ivan/IVAN@example.com", params={"page": "2", "limit": "5"}
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Videos fetched successfully"
        assert body["data"]["total"] == 12
        assert body["data"]["page"] == 2
        assert [v["id"] for v in body["data"]["items"]] == [
            str(v.id) for v in videos[5:10]
        ]
        item = body["data"]["items"][0]
        assert {"ownerId", "isPublished", "likesCount", "createdAt"} <= item.keys()

    @pytest.mark.asyncio
    async def test_sort_parameters_use_camel_case(self, api_env):
        _, videos = await seed_channel(api_env, 3)

        response = await api_env.client.get(
            "/videos/ivan/ivan@example.com",
            params={"sortBy": "createdAt", "sortType": "asc"},
        )

        assert [v["id"] for v in response.json()["data"]["items"]] == [
            str(v.id) for v in reversed(videos)
        ]

    @pytest.mark.asyncio
    async def test_unknown_channel_is_empty(self, api_env):
        response = await api_env.client.get("/videos/nobody/nobody@example.com")

        assert response.status_code == 200
        assert response.json()["data"]["items"] == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [{"sortBy": "password"}, {"limit": "0"}, {"page": "abc"}, {"userId": "x"}],
    )
    async def test_bad_parameters(self, api_env, params):
        response = await api_env.client.get(
            "/videos/ivan/ivan@example.com", params=params
        )

        assert response.status_code == 400
        assert response.json()["success"] is False


class TestVideoRoutes:
    """API tests for single-video routes."""

    @pytest.mark.asyncio
    async def test_create_video(self, api_env):
        user = await (await api_env.get(UserRepository)).save(make_user())

        response = await api_env.client.post(
            "/videos",
            json={
                "title": "Enzymes",
                "description": "Catalysts of life",
                "mediaUrl": "https://cdn.example.com/e.mp4",
                "thumbnailUrl": "https://cdn.example.com/e.jpg",
                "duration": 42.0,
            },
            headers=auth_headers(user),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["statusCode"] == 201
        assert body["data"]["isPublished"] is False
        assert body["data"]["ownerId"] == str(user.id)

    @pytest.mark.asyncio
    async def test_create_video_missing_title(self, api_env):
        user = await (await api_env.get(UserRepository)).save(make_user())

        response = await api_env.client.post(
            "/videos",
            json={"description": "No title"},
            headers=auth_headers(user),
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Title is required"

    @pytest.mark.asyncio
    async def test_create_video_negative_duration(self, api_env):
        user = await (await api_env.get(UserRepository)).save(make_user())

        response = await api_env.client.post(
            "/videos",
            json={"title": "T", "duration": -1},
            headers=auth_headers(user),
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_toggle_publish(self, api_env):
        video = await (await api_env.get(VideoRepository)).save(
            make_video(uuid4())
        )

        response = await api_env.client.patch(f"/videos/{video.id}/toggle-publish")

        assert response.status_code == 200
        assert response.json()["data"]["isPublished"] is True
        assert response.json()["message"] == "Video status updated successfully"

    @pytest.mark.asyncio
    async def test_toggle_publish_unknown_video(self, api_env):
        response = await api_env.client.patch(f"/videos/{uuid4()}/toggle-publish")

        assert response.status_code == 404
        assert response.json()["message"] == "Video not found"

    @pytest.mark.asyncio
    async def test_get_on_toggle_publish_is_not_a_listing(self, api_env):
        """GET on the toggle path must not come back as an empty channel page."""
        response = await api_env.client.get(f"/videos/{uuid4()}/toggle-publish")

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert response.json()["message"] == "Invalid Email format"

    @pytest.mark.asyncio
    async def test_get_video_malformed_id(self, api_env):
        response = await api_env.client.get("/videos/not-a-uuid")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_by_non_owner_is_forbidden(self, api_env):
        video = await (await api_env.get(VideoRepository)).save(make_video(uuid4()))

        response = await api_env.client.patch(
            f"/videos/{video.id}",
            json={"title": "Mine"},
            headers=auth_headers(make_user("mallory")),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_owner_deletes_video(self, api_env):
        user = await (await api_env.get(UserRepository)).save(make_user())
        video = await (await api_env.get(VideoRepository)).save(make_video(user.id))

        deleted = await api_env.client.delete(
            f"/videos/{video.id}", headers=auth_headers(user)
        )
        fetched = await api_env.client.get(f"/videos/{video.id}")

        assert deleted.status_code == 200
        assert deleted.json()["data"] is None
        assert fetched.status_code == 404
