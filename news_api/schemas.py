from pydantic import BaseModel, ConfigDict, Field

# Bounds of the 32-bit INTEGER columns.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


# --- Topic ---

class TopicResponse(BaseModel):
    slug: str
    description: str


class TopicList(BaseModel):
    topics: list[TopicResponse]


# --- User ---

class UserResponse(BaseModel):
    username: str
    name: str
    avatar_url: str


class UserList(BaseModel):
    users: list[UserResponse]


class UserEnvelope(BaseModel):
    user: UserResponse


# --- Comment ---

class CommentCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    username: str = Field(min_length=1)
    body: str = Field(min_length=1)


class CommentResponse(BaseModel):
    comment_id: int
    body: str
    article_id: int
    author: str
    votes: int
    created_at: str


class CommentList(BaseModel):
    comments: list[CommentResponse]


class CommentEnvelope(BaseModel):
    comment: CommentResponse


# --- Article ---

class ArticleVotesUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    inc_votes: int = Field(ge=INT_MIN, le=INT_MAX)


class ArticleResponse(BaseModel):
    article_id: int
    title: str
    topic: str
    author: str
    body: str
    created_at: str
    votes: int
    comment_count: int


class ArticleList(BaseModel):
    articles: list[ArticleResponse]


class ArticleEnvelope(BaseModel):
    article: ArticleResponse


# --- Health ---

class HealthResponse(BaseModel):
    status: str
    version: str
    cache_info: dict = {}
