from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from news_api.database import get_db
from news_api.dependencies import ArticleListParams
from news_api.schemas import ArticleEnvelope, ArticleList, CommentEnvelope, CommentList
from news_api.services import article_service, comment_service
from news_api.validation import validate_article_id, validate_comment_body, validate_patch_body

router = APIRouter(prefix="/api/articles", tags=["articles"])

# Path ids are declared as str so malformed values are rejected by the
# validator with 400 "Bad request" rather than FastAPI's 422.


@router.get("", response_model=ArticleList)
async def list_articles(
    params: ArticleListParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    q = params.query
    return {"articles": await article_service.get_articles(db, q.sort_by, q.order, q.topic)}


@router.get("/{article_id}", response_model=ArticleEnvelope)
async def get_article(article_id: str, db: AsyncSession = Depends(get_db)):
    article_id = validate_article_id(article_id)
    return {"article": await article_service.get_article(db, article_id)}


@router.patch("/{article_id}", response_model=ArticleEnvelope)
async def patch_article(
    article_id: str,
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
):
    article_id = validate_article_id(article_id)
    inc_votes = validate_patch_body(body)
    return {"article": await article_service.update_article_votes(db, article_id, inc_votes)}


@router.get("/{article_id}/comments", response_model=CommentList)
async def list_comments(article_id: str, db: AsyncSession = Depends(get_db)):
    article_id = validate_article_id(article_id)
    return {"comments": await comment_service.get_comments_by_article(db, article_id)}


@router.post("/{article_id}/comments", status_code=201, response_model=CommentEnvelope)
async def add_comment(
    article_id: str,
    body: Any = Body(None),
    db: AsyncSession = Depends(get_db),
):
    article_id = validate_article_id(article_id)
    data = validate_comment_body(body)
    return {"comment": await comment_service.add_comment(db, article_id, data)}
