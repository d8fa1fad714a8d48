"""FastAPI dependencies wiring the configured backends."""

from typing import Annotated

from fastapi import Depends

from articles.content import ContentStore, get_content_store
from articles.parser import ContentParser, get_content_parser
from articles.store import ArticleStore, get_article_store
from common.config import BinderConfig, get_config


def get_store(config: Annotated[BinderConfig, Depends(get_config)]) -> ArticleStore:
    """Dependency to get the article store."""
    return get_article_store(config)


def get_parser(config: Annotated[BinderConfig, Depends(get_config)]) -> ContentParser:
    """Dependency to get the content parser."""
    return get_content_parser(config.parser)


def get_contents(config: Annotated[BinderConfig, Depends(get_config)]) -> ContentStore:
    """Dependency to get the content store."""
    return get_content_store(config)
