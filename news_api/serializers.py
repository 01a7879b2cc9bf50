"""
Row -> response-dict conversion shared by every service.

Row shape equals response shape for this API, so the helpers only
normalise types: aggregate counts become ``int`` and timestamps become
UTC ISO-8601 strings with millisecond precision.
"""
from datetime import datetime, timezone
from typing import Any


def format_timestamp(value: datetime | None) -> str | None:
    """
    Render *value* as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    SQLite hands back naive datetimes; they were stored as UTC so they are
    tagged as such rather than shifted.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def topic_to_dict(topic: Any) -> dict:
    return {"slug": topic.slug, "description": topic.description}


def user_to_dict(user: Any) -> dict:
    return {
        "username": user.username,
        "name": user.name,
        "avatar_url": user.avatar_url,
    }


def article_row_to_dict(row: Any) -> dict:
    """Serialise an article row carrying a ``comment_count`` aggregate."""
    return {
        "article_id": row.article_id,
        "title": row.title,
        "topic": row.topic,
        "author": row.author,
        "body": row.body,
        "created_at": format_timestamp(row.created_at),
        "votes": row.votes,
        "comment_count": int(row.comment_count or 0),
    }


def comment_to_dict(comment: Any) -> dict:
    return {
        "comment_id": comment.comment_id,
        "body": comment.body,
        "article_id": comment.article_id,
        "author": comment.author,
        "votes": comment.votes,
        "created_at": format_timestamp(comment.created_at),
    }
