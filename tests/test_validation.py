"""
Validator unit tests - pure functions, no database or HTTP involved.
"""
import pytest

from news_api.errors import BadRequest, InvalidBody, InvalidOrder, InvalidSortColumn
from news_api.services import article_service
from news_api.validation import (
    MAX_ID,
    MIN_ID,
    SORT_COLUMNS,
    ArticleListQuery,
    validate_article_id,
    validate_comment_body,
    validate_comment_id,
    validate_list_query,
    validate_patch_body,
)


# ---------------------------------------------------------------------------
# Ids
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "raw, expected",
    [("1", 1), ("0", 0), ("0042", 42), ("-3", -3), ("+3", 3), (str(MAX_ID), MAX_ID), (str(MIN_ID), MIN_ID)],
)
def test_validate_article_id_accepts_integers(raw, expected):
    assert validate_article_id(raw) == expected


@pytest.mark.parametrize("raw", ["carrots", "", " 1", "1 ", "-", "+-3", "--3", "1e3", "2.0", str(MAX_ID + 1), str(MIN_ID - 1), None, 3])
def test_validate_article_id_rejects(raw):
    with pytest.raises(BadRequest) as exc_info:
        validate_article_id(raw)
    assert exc_info.value.msg == "Bad request"
    assert exc_info.value.status_code == 400


def test_validate_comment_id_uses_same_rule():
    assert validate_comment_id("19") == 19
    with pytest.raises(BadRequest):
        validate_comment_id("carrots")


# ---------------------------------------------------------------------------
# Listing query
# ---------------------------------------------------------------------------

def test_validate_list_query_defaults():
    assert validate_list_query() == ArticleListQuery("created_at", "desc", None)


def test_validate_list_query_passes_topic_through_unchecked():
    query = validate_list_query("votes", "asc", "no-such-topic")
    assert query == ArticleListQuery("votes", "asc", "no-such-topic")


@pytest.mark.parametrize("sort_by", sorted(SORT_COLUMNS))
def test_validate_list_query_accepts_every_sort_column(sort_by):
    assert validate_list_query(sort_by=sort_by).sort_by == sort_by


@pytest.mark.parametrize("sort_by", ["tom", "body", "VOTES", "", "votes desc"])
def test_validate_list_query_rejects_sort_by(sort_by):
    with pytest.raises(InvalidSortColumn) as exc_info:
        validate_list_query(sort_by=sort_by)
    assert exc_info.value.msg == "Invalid sort_by - no column with that name"


@pytest.mark.parametrize("order", ["tom", "ASC", "", "ascending"])
def test_validate_list_query_rejects_order(order):
    with pytest.raises(InvalidOrder) as exc_info:
        validate_list_query(order=order)
    assert exc_info.value.msg == "Bad order request"


def test_sort_columns_all_resolve_to_expressions():
    """Every allowed sort column has a column expression in the article service."""
    assert set(article_service._SORT_EXPRESSIONS) == SORT_COLUMNS


# ---------------------------------------------------------------------------
# PATCH body
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("delta", [0, 1, -60, 10**6])
def test_validate_patch_body(delta):
    assert validate_patch_body({"inc_votes": delta}) == delta


@pytest.mark.parametrize("body", [None, [], {}, {"votes": 1}, {"inc_votes": 1, "extra": 2}, "inc_votes"])
def test_validate_patch_body_invalid_shape(body):
    with pytest.raises(InvalidBody) as exc_info:
        validate_patch_body(body)
    assert exc_info.value.msg == "Invalid request body"


@pytest.mark.parametrize("value", ["cat", "1", 1.0, 2.5, False, None, [1]])
def test_validate_patch_body_non_integer(value):
    with pytest.raises(BadRequest):
        validate_patch_body({"inc_votes": value})


# ---------------------------------------------------------------------------
# Comment body
# ---------------------------------------------------------------------------

def test_validate_comment_body():
    data = validate_comment_body({"username": "rogersop", "body": "nice"})
    assert data.username == "rogersop"
    assert data.body == "nice"


@pytest.mark.parametrize(
    "body",
    [
        None,
        [],
        {},
        {"username": "rogersop"},
        {"body": "nice"},
        {"username": 1, "body": "nice"},
        {"username": "rogersop", "body": None},
        {"username": "", "body": "nice"},
        {"username": "rogersop", "body": "nice", "article_id": 3},
    ],
)
def test_validate_comment_body_rejects(body):
    with pytest.raises(BadRequest):
        validate_comment_body(body)


def test_validate_comment_body_accepts_long_username():
    data = validate_comment_body({"username": "u" * 500, "body": "nice"})
    assert len(data.username) == 500


# ---------------------------------------------------------------------------
# PATCH body range
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("delta", [MIN_ID, MAX_ID])
def test_validate_patch_body_accepts_column_bounds(delta):
    assert validate_patch_body({"inc_votes": delta}) == delta


@pytest.mark.parametrize("delta", [MAX_ID + 1, MIN_ID - 1, 10**20, -(10**20)])
def test_validate_patch_body_out_of_range(delta):
    with pytest.raises(BadRequest) as exc_info:
        validate_patch_body({"inc_votes": delta})
    assert exc_info.value.msg == "Bad request"
