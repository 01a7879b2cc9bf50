"""Fixture loader used by the test suite and ``scripts/seed.py``."""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from news_api.models import Article, Comment, Topic, User

logger = logging.getLogger(__name__)


async def seed(session: AsyncSession, data: dict) -> None:
    """
    Insert *data* (``topics``, ``users``, ``articles``, ``comments``) in
    dependency order and commit.

    Ids are left to the database, so articles and comments are numbered
    in list order on an empty schema.
    """
    session.add_all(Topic(**row) for row in data["topics"])
    session.add_all(User(**row) for row in data["users"])
    await session.flush()

    # One flush per article keeps id assignment in list order.
    for row in data["articles"]:
        session.add(Article(**row))
        await session.flush()
    for row in data["comments"]:
        session.add(Comment(**row))
        await session.flush()

    await session.commit()
    logger.info(
        "Seeded %d topics, %d users, %d articles, %d comments",
        len(data["topics"]), len(data["users"]),
        len(data["articles"]), len(data["comments"]),
    )
