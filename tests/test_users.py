"""
Reference-data and routing tests - topics, users, the endpoint
documentation object, and the catch-all "Route not found" response.
"""
import pytest
from httpx import AsyncClient


# ---------------------------------------------------------------------------
# Topics
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_topics(async_client: AsyncClient):
    resp = await async_client.get("/api/topics")
    assert resp.status_code == 200
    topics = resp.json()["topics"]
    assert {t["slug"] for t in topics} == {"mitch", "cats", "paper"}
    for topic in topics:
        assert set(topic) == {"slug", "description"}
        assert isinstance(topic["description"], str)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_list_users(async_client: AsyncClient):
    resp = await async_client.get("/api/users")
    assert resp.status_code == 200
    users = resp.json()["users"]
    assert len(users) == 4
    for user in users:
        assert set(user) == {"username", "name", "avatar_url"}


@pytest.mark.asyncio
async def test_get_user(async_client: AsyncClient):
    resp = await async_client.get("/api/users/rogersop")
    assert resp.status_code == 200
    assert resp.json() == {
        "user": {
            "username": "rogersop",
            "name": "paul",
            "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
        }
    }


@pytest.mark.asyncio
async def test_get_user_not_found(async_client: AsyncClient):
    resp = await async_client.get("/api/users/tom")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "No user with that username"}


# ---------------------------------------------------------------------------
# Endpoint documentation
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_api_describes_endpoints(async_client: AsyncClient):
    resp = await async_client.get("/api")
    assert resp.status_code == 200
    endpoints = resp.json()
    for key in (
        "GET /api",
        "GET /api/topics",
        "GET /api/users",
        "GET /api/users/:username",
        "GET /api/articles",
        "GET /api/articles/:article_id",
        "PATCH /api/articles/:article_id",
        "GET /api/articles/:article_id/comments",
        "POST /api/articles/:article_id/comments",
        "DELETE /api/comments/:comment_id",
    ):
        assert isinstance(endpoints[key], dict)
        assert "description" in endpoints[key]


# ---------------------------------------------------------------------------
# Unmatched routes
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/carrots", "/carrots", "/api/articles/3/votes"])
async def test_route_not_found(async_client: AsyncClient, path: str):
    resp = await async_client.get(path)
    assert resp.status_code == 404
    assert resp.json() == {"msg": "Route not found"}


@pytest.mark.asyncio
async def test_unsupported_method_is_route_not_found(async_client: AsyncClient):
    """A known path with a method it does not serve is reported like an unknown path."""
    resp = await async_client.delete("/api/users/tom")
    assert resp.status_code == 404
    assert resp.json() == {"msg": "Route not found"}
