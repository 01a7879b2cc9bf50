from fastapi import Query

from news_api.validation import ArticleListQuery, validate_list_query


class ArticleListParams:
    """
    FastAPI dependency that parses and validates the article listing
    query parameters.

    Usage in a router::

        @router.get("")
        async def list_articles(params: ArticleListParams = Depends()):
            ...

    Parameters are accepted as plain strings so that unknown values reach
    ``validate_list_query`` and are reported with their own messages
    instead of FastAPI's generic 422.

    Attributes
    ----------
    query:
        The validated ``ArticleListQuery`` (defaults applied).
    """

    def __init__(
        self,
        sort_by: str | None = Query(
            None,
            description="Column to sort by (default created_at).",
        ),
        order: str | None = Query(
            None,
            description="Sort direction: 'asc' or 'desc' (default desc).",
        ),
        topic: str | None = Query(
            None,
            description="Only return articles with this topic slug.",
        ),
    ) -> None:
        self.query: ArticleListQuery = validate_list_query(sort_by, order, topic)
