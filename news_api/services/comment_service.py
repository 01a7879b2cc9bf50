"""
Comment service - listing, creation and deletion of an article's comments.

Creation verifies its references explicitly, article first and then
author, so that each missing reference is reported with its own 404
message instead of surfacing as a foreign-key violation.
"""
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.config import settings
from news_api.errors import ARTICLE_NOT_FOUND, COMMENT_NOT_FOUND, USER_NOT_FOUND, NotFound
from news_api.models import Article, Comment
from news_api.schemas import CommentCreate
from news_api.serializers import comment_to_dict
from news_api.services import user_service

logger = logging.getLogger(__name__)


async def article_exists(db: AsyncSession, article_id: int) -> bool:
    result = await db.execute(
        select(Article.article_id).where(Article.article_id == article_id)
    )
    return result.scalar_one_or_none() is not None


async def get_comments_by_article(db: AsyncSession, article_id: int) -> list[dict]:
    """
    Return the comments on *article_id*, newest first.

    Raises ``NotFound`` when the article does not exist; an existing
    article without comments yields an empty list.
    """
    if not await article_exists(db, article_id):
        raise NotFound(ARTICLE_NOT_FOUND)

    q = (
        select(Comment)
        .where(Comment.article_id == article_id)
        .order_by(Comment.created_at.desc(), Comment.comment_id.desc())
    )
    result = await db.execute(q)
    return [comment_to_dict(c) for c in result.scalars().all()]


async def add_comment(db: AsyncSession, article_id: int, data: CommentCreate) -> dict:
    """
    Insert a comment by ``data.username`` on *article_id* and return it.

    ``comment_id``, ``votes`` and ``created_at`` are assigned by the
    database.  Raises ``NotFound`` for an unknown article, then for an
    unknown username.
    """
    if not await article_exists(db, article_id):
        raise NotFound(ARTICLE_NOT_FOUND)
    if not await user_service.user_exists(db, data.username):
        raise NotFound(USER_NOT_FOUND)

    comment = Comment(body=data.body, author=data.username, article_id=article_id)
    db.add(comment)
    await db.flush()
    # Pick up the server-side defaults (created_at, votes).
    await db.refresh(comment)

    logger.debug("Comment %d added to article %d", comment.comment_id, article_id)
    return comment_to_dict(comment)


async def delete_comment(db: AsyncSession, comment_id: int) -> None:
    """
    Delete the comment identified by *comment_id*.

    Raises ``NotFound`` when no row was removed.  The message follows
    ``settings.LEGACY_COMMENT_NOT_FOUND_MSG``.
    """
    result = await db.execute(delete(Comment).where(Comment.comment_id == comment_id))
    if result.rowcount == 0:
        raise NotFound(
            ARTICLE_NOT_FOUND if settings.LEGACY_COMMENT_NOT_FOUND_MSG else COMMENT_NOT_FOUND
        )
    logger.debug("Comment %d deleted", comment_id)
