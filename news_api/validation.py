"""
Input validation that runs before any storage access.

Every function here is synchronous and either returns the cleaned value
or raises one of the ``news_api.errors`` exceptions.  Existence checks
(does this topic / article / user exist?) are NOT done here;
the services perform them after the syntax has been accepted so that a
well-formed but unknown value yields 404 rather than 400.
"""
import re
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from news_api.errors import BadRequest, InvalidBody, InvalidOrder, InvalidSortColumn
from news_api.schemas import INT_MAX, INT_MIN, ArticleVotesUpdate, CommentCreate

_ID_RE = re.compile(r"[+-]?[0-9]+")

MIN_ID = INT_MIN
MAX_ID = INT_MAX

SORT_COLUMNS: frozenset[str] = frozenset(
    {"created_at", "votes", "title", "topic", "author", "article_id", "comment_count"}
)
SORT_ORDERS: frozenset[str] = frozenset({"asc", "desc"})

DEFAULT_SORT_BY = "created_at"
DEFAULT_ORDER = "desc"


@dataclass(frozen=True)
class ArticleListQuery:
    sort_by: str = DEFAULT_SORT_BY
    order: str = DEFAULT_ORDER
    topic: str | None = None


def validate_id(raw: Any) -> int:
    """
    Return *raw* as an int if it is a base-10 integer string, optionally signed,
    within the id column range, otherwise raise ``BadRequest``.
    """
    if not isinstance(raw, str) or not _ID_RE.fullmatch(raw):
        raise BadRequest()
    value = int(raw)
    if not MIN_ID <= value <= MAX_ID:
        raise BadRequest()
    return value


def validate_article_id(raw: Any) -> int:
    return validate_id(raw)


def validate_comment_id(raw: Any) -> int:
    return validate_id(raw)


def validate_list_query(
    sort_by: str | None = None,
    order: str | None = None,
    topic: str | None = None,
) -> ArticleListQuery:
    """
    Apply defaults and check ``sort_by`` / ``order`` against their allow-lists.

    ``topic`` is passed through untouched; whether it names a real topic
    is decided by the article service once the listing has run.
    """
    sort_by = DEFAULT_SORT_BY if sort_by is None else sort_by
    order = DEFAULT_ORDER if order is None else order

    if sort_by not in SORT_COLUMNS:
        raise InvalidSortColumn()
    if order not in SORT_ORDERS:
        raise InvalidOrder()
    return ArticleListQuery(sort_by=sort_by, order=order, topic=topic)


def validate_patch_body(body: Any) -> int:
    """
    Return the ``inc_votes`` delta from a PATCH body.

    The body must be an object whose only key is ``inc_votes``
    (``InvalidBody`` otherwise) and the value must be an integer
    (``BadRequest`` otherwise).
    """
    if not isinstance(body, dict) or set(body) != {"inc_votes"}:
        raise InvalidBody()
    try:
        return ArticleVotesUpdate.model_validate(body).inc_votes
    except ValidationError:
        raise BadRequest()


def validate_comment_body(body: Any) -> CommentCreate:
    """Return the parsed comment body; any shape problem is a ``BadRequest``."""
    if not isinstance(body, dict):
        raise BadRequest()
    try:
        return CommentCreate.model_validate(body)
    except ValidationError:
        raise BadRequest()
