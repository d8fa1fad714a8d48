"""Local JSON file implementation of the article table, for development and tests."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional

from articles.errors import ConflictError, NotFound, StoreError
from articles.models import ArticleRecord, ArticleStatus
from articles.store import ArticleStore, in_window, sort_records
from common.datetime import format_datetime, utc_now

logger = logging.getLogger(__name__)


class LocalArticleStore(ArticleStore):
    """Article store persisted as a single JSON object of items keyed by ULID."""

    def __init__(self, path: str | Path, clock: Callable[[], datetime] = utc_now):
        self.path = Path(path)
        self.clock = clock

    def _load(self) -> dict[str, dict[str, Any]]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open() as f:
                return json.load(f)
        except (OSError, ValueError) as exc:
            raise StoreError(f"Failed to read {self.path}: {exc}") from exc

    def _save(self, items: dict[str, dict[str, Any]]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tmp_path.open("w") as f:
                json.dump(items, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            raise StoreError(f"Failed to write {self.path}: {exc}") from exc

    def _get_item(self, items: dict[str, dict[str, Any]], article_id: str) -> dict[str, Any]:
        item = items.get(article_id)
        if item is None:
            raise NotFound(f"Article {article_id} not found")
        return item

    def create(self, record: ArticleRecord) -> None:
        items = self._load()
        if record.id in items:
            raise StoreError(f"Article {record.id} already exists")
        items[record.id] = record.to_item()
        self._save(items)
        logger.info("Stored article %s in %s", record.id, self.path)

    def get(self, article_id: str) -> ArticleRecord:
        return ArticleRecord.from_item(self._get_item(self._load(), article_id))

    def list_by_next_read_date(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[ArticleRecord]:
        records = [ArticleRecord.from_item(item) for item in self._load().values()]
        return sort_records([r for r in records if in_window(r.next_read_date, start, end)])

    def update_status(
        self,
        article_id: str,
        new_status: ArticleStatus,
        expected_status: Optional[ArticleStatus] = None,
    ) -> ArticleRecord:
        items = self._load()
        item = self._get_item(items, article_id)
        current = ArticleRecord.from_item(item)
        if expected_status is not None and current.status != expected_status:
            raise ConflictError(
                f"Article {article_id} status changed from {expected_status.value} "
                f"to {current.status.value} during update"
            )

        next_read_date = self.clock() + new_status.repeat_duration()
        logger.info(
            "Updating article %s with status=%s next_read_date=%s",
            article_id,
            new_status.value,
            format_datetime(next_read_date),
        )
        item["status"] = new_status.value
        item["next_read_date"] = format_datetime(next_read_date)
        self._save(items)
        return ArticleRecord.from_item(item)

    def update_next_read_date(self, article_id: str, next_read_date: datetime) -> ArticleRecord:
        items = self._load()
        item = self._get_item(items, article_id)
        logger.info(
            "Updating article %s with next_read_date=%s", article_id, format_datetime(next_read_date)
        )
        item["next_read_date"] = format_datetime(next_read_date)
        self._save(items)
        return ArticleRecord.from_item(item)
