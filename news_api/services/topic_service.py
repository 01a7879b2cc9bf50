"""
Topic service - read-only access to the externally seeded topic table.

The list is served cache-aside from Redis; topics never change while the
API is running, so no invalidation path exists.
"""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.cache import cache
from news_api.config import settings
from news_api.models import Topic
from news_api.serializers import topic_to_dict

logger = logging.getLogger(__name__)

CACHE_KEY = "topics:list"


async def get_topics(db: AsyncSession) -> list[dict]:
    """Return every topic ordered by slug."""
    cached = await cache.get(CACHE_KEY)
    if cached is not None:
        return cached

    result = await db.execute(select(Topic).order_by(Topic.slug))
    topics = [topic_to_dict(t) for t in result.scalars().all()]
    await cache.set(CACHE_KEY, topics, ttl=settings.CACHE_TTL_REFERENCE)
    return topics


async def topic_exists(db: AsyncSession, slug: str) -> bool:
    exists = any(t["slug"] == slug for t in await get_topics(db))
    logger.debug("Topic %r exists: %s", slug, exists)
    return exists
