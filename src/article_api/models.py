"""Article API Pydantic models."""

from pydantic import BaseModel, ConfigDict, Field

from articles.models import ArticleStatus


class CreateArticleRequest(BaseModel):
    """Body of POST /article."""

    model_config = ConfigDict(populate_by_name=True)

    article_url: str = Field(alias="articleUrl")


class MessageResponse(BaseModel):
    message: str


class ArticleResponse(BaseModel):
    """Article response model. Timestamps are RFC 3339 UTC strings."""

    id: str
    title: str
    author: str
    source_url: str
    content_location: str | None = None
    summary: str | None = None
    ingest_date: str
    status: ArticleStatus
    next_read_date: str


class ErrorResponse(BaseModel):
    error: str
