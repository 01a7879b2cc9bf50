from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from news_api.database import Base


# ---------------------------------------------------------------------------
# Topic
# ---------------------------------------------------------------------------
class Topic(Base):
    __tablename__ = "topics"

    slug: Mapped[str] = mapped_column(String(100), primary_key=True)
    description: Mapped[str] = mapped_column(String(300), nullable=False)


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------
class User(Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(100), primary_key=True)
    name: Mapped[str] = mapped_column(String(150), nullable=False)
    avatar_url: Mapped[str] = mapped_column(String(500), nullable=False)


# ---------------------------------------------------------------------------
# Article
# ---------------------------------------------------------------------------
class Article(Base):
    __tablename__ = "articles"
    # Never hand out a deleted row's id again (SQLite reuses rowids otherwise).
    __table_args__ = {"sqlite_autoincrement": True}

    article_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(300), nullable=False)
    topic: Mapped[str] = mapped_column(
        String(100), ForeignKey("topics.slug"), nullable=False, index=True
    )
    author: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.username"), nullable=False, index=True
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
    # No floor: votes may go negative.
    votes: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)


# ---------------------------------------------------------------------------
# Comment
# ---------------------------------------------------------------------------
class Comment(Base):
    __tablename__ = "comments"
    __table_args__ = {"sqlite_autoincrement": True}

    comment_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    article_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("articles.article_id"), nullable=False, index=True
    )
    author: Mapped[str] = mapped_column(
        String(100), ForeignKey("users.username"), nullable=False
    )
    votes: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
