"""
Article service - query and mutation resolution for the Article resource.

Design notes
------------
- ``comment_count`` is never stored.  Every read computes it with a LEFT
  OUTER JOIN onto ``comments`` grouped by ``article_id``, so articles
  without comments report 0 and the count always reflects live rows.
- ``sort_by`` arrives already checked against the validator's allow-list
  and is mapped here to a column expression; user input never reaches
  the SQL text.  ``article_id`` ascending is always appended as a tie
  breaker so equal sort keys come back in a stable order.
- Vote changes are a single ``UPDATE ... SET votes = votes + :delta``
  so concurrent patches to one article cannot lose an increment.
- Service functions never commit; the transaction boundary is owned by
  the ``get_db`` dependency in the router layer.
"""
import logging

from sqlalchemy import asc, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.errors import ARTICLE_NOT_FOUND, NotFound, UnknownTopic
from news_api.models import Article, Comment
from news_api.serializers import article_row_to_dict
from news_api.services import topic_service
from news_api.validation import DEFAULT_ORDER, DEFAULT_SORT_BY

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_comment_count = func.count(Comment.comment_id).label("comment_count")

# Keys mirror ``validation.SORT_COLUMNS``.
_SORT_EXPRESSIONS = {
    "created_at": Article.created_at,
    "votes": Article.votes,
    "title": Article.title,
    "topic": Article.topic,
    "author": Article.author,
    "article_id": Article.article_id,
    "comment_count": _comment_count,
}


def _articles_with_counts():
    """Base SELECT of every article column plus its live comment count."""
    return (
        select(
            Article.article_id,
            Article.title,
            Article.topic,
            Article.author,
            Article.body,
            Article.created_at,
            Article.votes,
            _comment_count,
        )
        .outerjoin(Comment, Comment.article_id == Article.article_id)
        .group_by(Article.article_id)
    )


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

async def get_articles(
    db: AsyncSession,
    sort_by: str = DEFAULT_SORT_BY,
    order: str = DEFAULT_ORDER,
    topic: str | None = None,
) -> list[dict]:
    """
    Return every article with its comment count, optionally restricted to
    *topic*, sorted by *sort_by* in *order*.

    An empty result for a *topic* that does not exist raises
    ``UnknownTopic``; an empty result for an existing topic is returned
    as an empty list.
    """
    sort_expr = _SORT_EXPRESSIONS[sort_by]
    order_expr = asc(sort_expr) if order == "asc" else desc(sort_expr)

    q = _articles_with_counts()
    if topic is not None:
        q = q.where(Article.topic == topic)
    q = q.order_by(order_expr, Article.article_id.asc())

    result = await db.execute(q)
    articles = [article_row_to_dict(row) for row in result.all()]
    logger.debug(
        "Listed %d article(s) sort_by=%s order=%s topic=%r",
        len(articles), sort_by, order, topic,
    )

    if not articles and topic is not None:
        if not await topic_service.topic_exists(db, topic):
            raise UnknownTopic()
    return articles


async def get_article(db: AsyncSession, article_id: int) -> dict:
    """
    Return the article identified by *article_id* with its comment count.

    Raises ``NotFound`` when the article does not exist.
    """
    q = _articles_with_counts().where(Article.article_id == article_id)
    result = await db.execute(q)
    row = result.one_or_none()
    if row is None:
        raise NotFound(ARTICLE_NOT_FOUND)
    return article_row_to_dict(row)


async def update_article_votes(db: AsyncSession, article_id: int, inc_votes: int) -> dict:
    """
    Add *inc_votes* (possibly negative) to the article's votes and return
    the updated article.

    The increment is applied by the database in one statement; the row is
    then re-read with its comment count.  Raises ``NotFound`` when no
    article matches.
    """
    stmt = (
        update(Article)
        .where(Article.article_id == article_id)
        .values(votes=Article.votes + inc_votes)
        .returning(Article.article_id)
        .execution_options(synchronize_session=False)
    )
    result = await db.execute(stmt)
    if result.scalar_one_or_none() is None:
        raise NotFound(ARTICLE_NOT_FOUND)

    logger.debug("Article %d votes changed by %+d", article_id, inc_votes)
    return await get_article(db, article_id)
