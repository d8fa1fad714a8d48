"""
Abstract interface for the article table.

The store is the only component that writes article records. Implementations
persist records in DynamoDB or in a local JSON file.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from articles.models import ArticleRecord, ArticleStatus

if TYPE_CHECKING:
    from common.config import BinderConfig


class ArticleStore(ABC):
    """Abstract base class for article table backends."""

    @abstractmethod
    def create(self, record: ArticleRecord) -> None:
        """
        Persist a new article record.

        Raises:
            StoreError: If a record with the same ID already exists.
        """

    @abstractmethod
    def get(self, article_id: str) -> ArticleRecord:
        """
        Get a single article by ID.

        Raises:
            NotFound: If no record has that ID.
        """

    @abstractmethod
    def list_by_next_read_date(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[ArticleRecord]:
        """
        List articles whose next read date lies in [start, end].

        Either bound may be omitted. Results are sorted by next read date, then ID.
        """

    @abstractmethod
    def update_status(
        self,
        article_id: str,
        new_status: ArticleStatus,
        expected_status: Optional[ArticleStatus] = None,
    ) -> ArticleRecord:
        """
        Set the status and reschedule from the new status's repeat duration.

        Both fields are written in a single update. When expected_status is
        given, the write only succeeds if the stored status still matches it.

        Raises:
            NotFound: If no record has that ID.
            ConflictError: If the stored status no longer matches expected_status.
        """

    @abstractmethod
    def update_next_read_date(self, article_id: str, next_read_date: datetime) -> ArticleRecord:
        """
        Set the next read date, leaving the status untouched.

        Raises:
            NotFound: If no record has that ID.
        """


def in_window(value: datetime, start: Optional[datetime], end: Optional[datetime]) -> bool:
    if start is not None and value < start:
        return False
    if end is not None and value > end:
        return False
    return True


def sort_records(records: list[ArticleRecord]) -> list[ArticleRecord]:
    return sorted(records, key=lambda r: (r.next_read_date, r.id))


def get_article_store(config: BinderConfig) -> ArticleStore:
    """Create the article store for the configured backend."""
    if config.is_dynamodb:
        from articles.dynamodb_store import DynamoArticleStore
        from common.aws import get_dynamodb_table

        table = get_dynamodb_table(
            config.dynamodb.table_name,
            region=config.dynamodb.region,
            endpoint_url=config.dynamodb.endpoint_url,
        )
        return DynamoArticleStore(table, page_size=config.dynamodb.page_size)

    from articles.local_store import LocalArticleStore

    return LocalArticleStore(Path(config.local.data_dir) / config.local.table_file)
