"""
Integration tests for liked songs.
"""

import pytest
from httpx import AsyncClient


async def like(client: AsyncClient, song_id: str, headers: dict):
    return await client.post("/api/songs/like", json={"songId": song_id}, headers=headers)


async def unlike(client: AsyncClient, song_id: str, headers: dict):
    return await client.request(
        "DELETE", "/api/songs/unlike", json={"songId": song_id}, headers=headers
    )


async def liked(client: AsyncClient, headers: dict) -> list:
    response = await client.get("/api/songs/liked", headers=headers)
    assert response.status_code == 200
    return response.json()["likedSongs"]


class TestLikeSong:

    @pytest.mark.asyncio
    async def test_like(self, async_client: AsyncClient, auth_headers: dict):
        response = await like(async_client, "Songs/f2/song.mp3", auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "message": "Song added to favorites",
            "songId": "Songs/f2/song.mp3",
        }
        assert await liked(async_client, auth_headers) == ["Songs/f2/song.mp3"]

    @pytest.mark.asyncio
    async def test_like_twice_conflicts_and_leaves_set_unchanged(
        self, async_client: AsyncClient, auth_headers: dict
    ):
        await like(async_client, "trackA", auth_headers)
        await like(async_client, "trackB", auth_headers)

        response = await like(async_client, "trackA", auth_headers)

        assert response.status_code == 400
        assert response.json() == {
            "error": "conflict",
            "message": "Song already in favorites",
        }
        assert sorted(await liked(async_client, auth_headers)) == ["trackA", "trackB"]

    @pytest.mark.asyncio
    async def test_missing_song_id(self, async_client: AsyncClient, auth_headers: dict):
        response = await async_client.post("/api/songs/like", json={}, headers=auth_headers)
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_favorites_are_per_user(
        self,
        async_client: AsyncClient,
        auth_headers: dict,
        second_auth_headers: dict,
    ):
        await like(async_client, "trackA", auth_headers)

        # The same song can be liked independently by another user
        response = await like(async_client, "trackA", second_auth_headers)
        assert response.status_code == 200

        await unlike(async_client, "trackA", second_auth_headers)
        assert await liked(async_client, auth_headers) == ["trackA"]
        assert await liked(async_client, second_auth_headers) == []

    @pytest.mark.asyncio
    async def test_profile_lists_favorites(self, async_client: AsyncClient, auth_headers: dict):
        await like(async_client, "trackA", auth_headers)

        profile = (await async_client.get("/api/user/profile", headers=auth_headers)).json()
        assert profile["favoriteSongs"] == ["trackA"]


class TestUnlikeSong:

    @pytest.mark.asyncio
    async def test_unlike(self, async_client: AsyncClient, auth_headers: dict):
        await like(async_client, "trackA", auth_headers)

        response = await unlike(async_client, "trackA", auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "message": "Song removed from favorites",
            "songId": "trackA",
        }
        assert await liked(async_client, auth_headers) == []

    @pytest.mark.asyncio
    async def test_unlike_not_liked_succeeds(self, async_client: AsyncClient, auth_headers: dict):
        response = await unlike(async_client, "never-liked", auth_headers)

        assert response.status_code == 200
        assert await liked(async_client, auth_headers) == []

    @pytest.mark.asyncio
    async def test_relike_after_unlike(self, async_client: AsyncClient, auth_headers: dict):
        await like(async_client, "trackA", auth_headers)
        await unlike(async_client, "trackA", auth_headers)

        response = await like(async_client, "trackA", auth_headers)

        assert response.status_code == 200
        assert await liked(async_client, auth_headers) == ["trackA"]


class TestLikedSongsAuth:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,path",
        [
            ("POST", "/api/songs/like"),
            ("DELETE", "/api/songs/unlike"),
            ("GET", "/api/songs/liked"),
        ],
    )
    async def test_requires_auth(self, async_client: AsyncClient, method: str, path: str):
        kwargs = {} if method == "GET" else {"json": {"songId": "trackA"}}
        response = await async_client.request(method, path, **kwargs)
        assert response.status_code == 401
