"""DynamoDB implementation of the article table."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Optional

from botocore.exceptions import ClientError

from articles.errors import ConflictError, NotFound, StoreError
from articles.models import ArticleRecord, ArticleStatus
from articles.store import ArticleStore, in_window, sort_records
from common.datetime import format_datetime, utc_now

logger = logging.getLogger(__name__)

CONDITIONAL_CHECK_FAILED = "ConditionalCheckFailedException"


def _error_code(exc: ClientError) -> str:
    return exc.response.get("Error", {}).get("Code", "")


class DynamoArticleStore(ArticleStore):
    """Article store backed by a DynamoDB table keyed by ``ulid``."""

    def __init__(self, table, page_size: int = 100, clock: Callable[[], datetime] = utc_now):
        self.table = table
        self.page_size = page_size
        self.clock = clock

    def create(self, record: ArticleRecord) -> None:
        try:
            self.table.put_item(
                Item=record.to_item(),
                ConditionExpression="attribute_not_exists(ulid)",
            )
        except ClientError as exc:
            if _error_code(exc) == CONDITIONAL_CHECK_FAILED:
                raise StoreError(f"Article {record.id} already exists") from exc
            raise StoreError(f"Failed to create article {record.id}: {exc}") from exc
        logger.info("Stored article %s in %s", record.id, self.table.name)

    def _get_item(self, article_id: str) -> dict[str, Any]:
        try:
            response = self.table.get_item(Key={"ulid": article_id}, ConsistentRead=True)
        except ClientError as exc:
            raise StoreError(f"Failed to read article {article_id}: {exc}") from exc
        item = response.get("Item")
        if item is None:
            raise NotFound(f"Article {article_id} not found")
        return item

    def get(self, article_id: str) -> ArticleRecord:
        return ArticleRecord.from_item(self._get_item(article_id))

    def list_by_next_read_date(
        self,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[ArticleRecord]:
        # Older items store next_read_date JSON-quoted with a local offset, or
        # not at all, so the window is applied to decoded records.
        scan_kwargs: dict[str, Any] = {"Limit": self.page_size, "ConsistentRead": True}

        records = []
        scanned = 0
        pages = 0
        try:
            while True:
                response = self.table.scan(**scan_kwargs)
                pages += 1
                for item in response.get("Items", []):
                    scanned += 1
                    record = ArticleRecord.from_item(item)
                    if in_window(record.next_read_date, start, end):
                        records.append(record)
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except ClientError as exc:
            raise StoreError(f"Failed to list articles: {exc}") from exc

        logger.info(
            "Loaded %d of %d articles from %s in %d pages",
            len(records),
            scanned,
            self.table.name,
            pages,
        )
        return sort_records(records)

    def update_status(
        self,
        article_id: str,
        new_status: ArticleStatus,
        expected_status: Optional[ArticleStatus] = None,
    ) -> ArticleRecord:
        next_read_date = self.clock() + new_status.repeat_duration()
        logger.info(
            "Updating article %s with status=%s next_read_date=%s",
            article_id,
            new_status.value,
            format_datetime(next_read_date),
        )

        condition = "attribute_exists(ulid)"
        values = {
            ":status": new_status.value,
            ":next_read_date": format_datetime(next_read_date),
        }
        if expected_status is not None:
            # Condition on the stored attribute as written, which may be a
            # legacy JSON-quoted or {"Repeat": ...} form, or missing.
            stored = self._get_item(article_id)
            current = ArticleRecord.from_item(stored)
            if current.status != expected_status:
                raise ConflictError(
                    f"Article {article_id} status changed from {expected_status.value} "
                    f"to {current.status.value} during update"
                )
            if "status" in stored:
                condition += " AND #S = :expected_status"
                values[":expected_status"] = stored["status"]
            else:
                condition += " AND attribute_not_exists(#S)"

        try:
            response = self.table.update_item(
                Key={"ulid": article_id},
                UpdateExpression="SET #S = :status, #D = :next_read_date",
                ConditionExpression=condition,
                ExpressionAttributeNames={"#S": "status", "#D": "next_read_date"},
                ExpressionAttributeValues=values,
                ReturnValues="ALL_NEW",
            )
        except ClientError as exc:
            if _error_code(exc) != CONDITIONAL_CHECK_FAILED:
                raise StoreError(f"Failed to update article {article_id}: {exc}") from exc
            if expected_status is None:
                raise NotFound(f"Article {article_id} not found") from exc
            # Either the record is gone or its status moved underneath us.
            current = self.get(article_id)
            raise ConflictError(
                f"Article {article_id} status changed from {expected_status.value} "
                f"to {current.status.value} during update"
            ) from exc

        return ArticleRecord.from_item(response["Attributes"])

    def update_next_read_date(self, article_id: str, next_read_date: datetime) -> ArticleRecord:
        logger.info(
            "Updating article %s with next_read_date=%s", article_id, format_datetime(next_read_date)
        )
        try:
            response = self.table.update_item(
                Key={"ulid": article_id},
                UpdateExpression="SET #D = :next_read_date",
                ConditionExpression="attribute_exists(ulid)",
                ExpressionAttributeNames={"#D": "next_read_date"},
                ExpressionAttributeValues={":next_read_date": format_datetime(next_read_date)},
                ReturnValues="ALL_NEW",
            )
        except ClientError as exc:
            if _error_code(exc) == CONDITIONAL_CHECK_FAILED:
                raise NotFound(f"Article {article_id} not found") from exc
            raise StoreError(f"Failed to update article {article_id}: {exc}") from exc

        return ArticleRecord.from_item(response["Attributes"])
