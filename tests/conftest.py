"""Shared fixtures for article tests."""

from datetime import datetime, timezone

import pytest

from articles.content import LocalContentStore
from articles.errors import ExtractionFailed
from articles.local_store import LocalArticleStore
from articles.models import ArticleRecord, ArticleStatus, ParsedArticle
from articles.parser import ContentParser
from common.config import BinderConfig, LocalConfig, ParserConfig, reset_config, set_config

NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class StubParser(ContentParser):
    """Returns a fixed parse result, or raises ExtractionFailed when given none."""

    def __init__(self, result: ParsedArticle | None = None):
        self.result = result
        self.calls: list[str] = []

    def parse(self, url: str) -> ParsedArticle:
        self.calls.append(url)
        if self.result is None:
            raise ExtractionFailed(f"Failed to parse {url}")
        return self.result


def make_record(article_id: str, status: ArticleStatus = ArticleStatus.NEW, next_read_date: datetime = NOW, **kwargs) -> ArticleRecord:
    return ArticleRecord(
        id=article_id,
        source_url=kwargs.pop("source_url", f"https://example.com/{article_id}"),
        ingest_date=kwargs.pop("ingest_date", NOW),
        next_read_date=next_read_date,
        status=status,
        **kwargs,
    )


@pytest.fixture
def store(tmp_path) -> LocalArticleStore:
    return LocalArticleStore(tmp_path / "articles.json", clock=lambda: NOW)


@pytest.fixture
def content_store(tmp_path) -> LocalContentStore:
    return LocalContentStore(tmp_path / "content")


@pytest.fixture
def local_config(tmp_path):
    """Install a local-storage config for handlers and the API, then reset it."""
    config = BinderConfig(
        storage="local",
        local=LocalConfig(data_dir=str(tmp_path)),
        parser=ParserConfig(mode="local"),
    )
    set_config(config)
    yield config
    reset_config()
