"""Article API endpoints, mirroring the Lambda routes."""

from datetime import datetime
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query, Response

from article_api.dependencies import get_contents, get_parser, get_store
from article_api.models import ArticleResponse, CreateArticleRequest, ErrorResponse, MessageResponse
from articles.content import ContentStore
from articles.errors import NotFound
from articles.parser import ContentParser
from articles.store import ArticleStore
from common.datetime import parse_datetime
from common.ids import is_valid_article_id
from common.serialization import serialize_dataclass
from create_article.create_article import create_article, success_message
from get_article_content.get_article_content import get_article_content
from get_articles.get_articles import list_articles
from update_article.helpers import parse_update_request
from update_article.update_article import update_article

router = APIRouter(tags=["articles"], responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}})


def _require_article_id(article_id: str) -> str:
    if not is_valid_article_id(article_id):
        raise NotFound(f"Article {article_id} not found")
    return article_id


@router.post("/article", response_model=MessageResponse)
def post_article(
    request: CreateArticleRequest,
    store: Annotated[ArticleStore, Depends(get_store)],
    parser: Annotated[ContentParser, Depends(get_parser)],
    contents: Annotated[ContentStore, Depends(get_contents)],
):
    """Ingest a new article from its URL."""
    record = create_article(request.article_url, store, parser, contents)
    return MessageResponse(message=success_message(record.source_url))


@router.get("/articles", response_model=list[ArticleResponse])
def get_articles(
    store: Annotated[ArticleStore, Depends(get_store)],
    start: Annotated[datetime | None, Query(description="Earliest next read date (RFC 3339)")] = None,
    end: Annotated[datetime | None, Query(description="Latest next read date (RFC 3339)")] = None,
):
    """List articles whose next read date falls in [start, end]."""
    articles = list_articles(
        store,
        start=parse_datetime(start) if start else None,
        end=parse_datetime(end) if end else None,
    )
    return [ArticleResponse(**serialize_dataclass(article)) for article in articles]


@router.put("/article/{ulid}")
def put_article(
    ulid: str,
    store: Annotated[ArticleStore, Depends(get_store)],
    body: Annotated[Any, Body()] = None,
):
    """Advance, archive or reschedule an article."""
    update_article(store, _require_article_id(ulid), parse_update_request(body))
    return Response(status_code=200)


@router.get("/article/{ulid}/content")
def get_content(
    ulid: str,
    store: Annotated[ArticleStore, Depends(get_store)],
    contents: Annotated[ContentStore, Depends(get_contents)],
):
    """Return the stored full text of an article."""
    text, content_type = get_article_content(store, contents, _require_article_id(ulid))
    return Response(content=text, media_type=content_type)
