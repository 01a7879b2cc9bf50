"""
User service - read-only access to the externally seeded user table.

The full listing is cached like topics.  Single-user lookups and the
existence pre-check used by comment insertion always hit the database.
"""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.cache import cache
from news_api.config import settings
from news_api.errors import USER_NOT_FOUND, NotFound
from news_api.models import User
from news_api.serializers import user_to_dict

CACHE_KEY = "users:list"


async def get_users(db: AsyncSession) -> list[dict]:
    """Return every user ordered by username."""
    cached = await cache.get(CACHE_KEY)
    if cached is not None:
        return cached

    result = await db.execute(select(User).order_by(User.username))
    users = [user_to_dict(u) for u in result.scalars().all()]
    await cache.set(CACHE_KEY, users, ttl=settings.CACHE_TTL_REFERENCE)
    return users


async def get_user(db: AsyncSession, username: str) -> dict:
    """
    Return the user identified by *username*.

    Raises ``NotFound`` when no such user exists.
    """
    result = await db.execute(select(User).where(User.username == username))
    user = result.scalar_one_or_none()
    if user is None:
        raise NotFound(USER_NOT_FOUND)
    return user_to_dict(user)


async def user_exists(db: AsyncSession, username: str) -> bool:
    result = await db.execute(select(User.username).where(User.username == username))
    return result.scalar_one_or_none() is not None
