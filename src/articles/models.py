"""Data models for articles and their review schedule."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Optional

from articles.errors import InvalidRequest, StoreError
from common.datetime import format_datetime, parse_datetime
from common.ids import article_id_timestamp

NO_TITLE = "NO TITLE FOUND"
NO_AUTHOR = "NO AUTHOR FOUND"


class ArticleStatus(str, Enum):
    """Spaced-repetition stage of an article."""

    NEW = "New"
    REPETITION1 = "Repetition1"
    REPETITION2 = "Repetition2"
    REPETITION3 = "Repetition3"
    REPETITION4 = "Repetition4"
    ARCHIVE = "Archive"

    def repeat_duration(self) -> timedelta:
        """Time until an article in this status is due again."""
        return _REPEAT_DURATIONS[self]

    def next_status(self) -> ArticleStatus:
        """Status an article moves to after being reviewed. Archive is absorbing."""
        return _NEXT_STATUS[self]

    def can_move_to(self, target: ArticleStatus) -> bool:
        """Statuses only move forward along the schedule. Archive only moves to itself."""
        order = list(ArticleStatus)
        return order.index(target) >= order.index(self)

    @classmethod
    def parse(cls, value: Any) -> ArticleStatus:
        """Parse a status name case-insensitively."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for status in cls:
                if status.value.lower() == value.strip().lower():
                    return status
        raise InvalidRequest(f"Unknown article status: {value!r}")


_REPEAT_DURATIONS = {
    ArticleStatus.NEW: timedelta(weeks=1),
    ArticleStatus.REPETITION1: timedelta(weeks=2),
    ArticleStatus.REPETITION2: timedelta(weeks=4),
    ArticleStatus.REPETITION3: timedelta(weeks=12),
    ArticleStatus.REPETITION4: timedelta(weeks=26),
    ArticleStatus.ARCHIVE: timedelta(weeks=52),
}

_NEXT_STATUS = {
    ArticleStatus.NEW: ArticleStatus.REPETITION1,
    ArticleStatus.REPETITION1: ArticleStatus.REPETITION2,
    ArticleStatus.REPETITION2: ArticleStatus.REPETITION3,
    ArticleStatus.REPETITION3: ArticleStatus.REPETITION4,
    ArticleStatus.REPETITION4: ArticleStatus.ARCHIVE,
    ArticleStatus.ARCHIVE: ArticleStatus.ARCHIVE,
}


@dataclass
class ParsedArticle:
    """Response of the content-parsing service (Readability output)."""
    title: Optional[str] = None
    byline: Optional[str] = None
    dir: Optional[str] = None
    lang: Optional[str] = None
    content: Optional[str] = None
    text_content: Optional[str] = None
    length: Optional[int] = None
    excerpt: Optional[str] = None
    site_name: Optional[str] = None

    @classmethod
    def from_response(cls, data: dict[str, Any] | None) -> ParsedArticle:
        """Build from the camelCase JSON the parsing service returns."""
        data = data or {}
        return cls(
            title=data.get("title"),
            byline=data.get("byline"),
            dir=data.get("dir"),
            lang=data.get("lang"),
            content=data.get("content"),
            text_content=data.get("textContent"),
            length=data.get("length"),
            excerpt=data.get("excerpt"),
            site_name=data.get("siteName"),
        )

    @property
    def full_text(self) -> Optional[str]:
        for text in (self.content, self.text_content):
            if text and text.strip():
                return text
        return None


@dataclass
class ArticleRecord:
    """Persisted article and its review state."""
    id: str
    source_url: str
    ingest_date: datetime
    next_read_date: datetime
    status: ArticleStatus = ArticleStatus.NEW
    title: str = NO_TITLE
    author: str = NO_AUTHOR
    content_location: Optional[str] = None
    summary: Optional[str] = None

    def to_item(self) -> dict[str, Any]:
        """Convert to the persisted item shape (keyed by ``ulid``)."""
        item = {
            "ulid": self.id,
            "title": self.title,
            "author": self.author,
            "source_url": self.source_url,
            "ingest_date": format_datetime(self.ingest_date),
            "status": self.status.value,
            "next_read_date": format_datetime(self.next_read_date),
        }
        if self.content_location is not None:
            item["content_location"] = self.content_location
        if self.summary is not None:
            item["summary"] = self.summary
        return item

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> ArticleRecord:
        """Build from a persisted item, defaulting fields missing from older item shapes.

        Raises:
            StoreError: If the item cannot be decoded.
        """
        try:
            article_id = item["ulid"]
            status, legacy_read_date = _parse_stored_status(item.get("status"))

            ingest_date = item.get("ingest_date")
            ingest_date = parse_datetime(ingest_date) if ingest_date else article_id_timestamp(article_id)

            next_read_date = item.get("next_read_date") or legacy_read_date
            if next_read_date:
                next_read_date = parse_datetime(_unquote(next_read_date))
            else:
                next_read_date = ingest_date + status.repeat_duration()
        except (KeyError, TypeError, ValueError, InvalidRequest) as exc:
            raise StoreError(f"Malformed article item {item.get('ulid')!r}: {exc}") from exc

        return cls(
            id=article_id,
            title=item.get("title") or NO_TITLE,
            author=item.get("author") or NO_AUTHOR,
            source_url=item.get("source_url") or item.get("article_url") or "",
            content_location=item.get("content_location") or item.get("s3_archive_arn"),
            summary=item.get("summary"),
            ingest_date=ingest_date,
            status=status,
            next_read_date=next_read_date,
        )


def _unquote(value: str) -> str:
    # Older items stored JSON-encoded strings, e.g. "\"New\"".
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return json.loads(value)
    return value


def _parse_stored_status(value: Any) -> tuple[ArticleStatus, Optional[str]]:
    """Return (status, legacy next-read-date) for a stored status value."""
    if value is None or value == "":
        return ArticleStatus.NEW, None
    if isinstance(value, str):
        value = _unquote(value)
        if value.startswith("{"):
            value = json.loads(value)
    if isinstance(value, dict) and "Repeat" in value:
        return ArticleStatus.REPETITION1, value["Repeat"]
    return ArticleStatus.parse(value), None


@dataclass
class AdvanceStatus:
    """Move the article to the next status in the schedule."""


@dataclass
class SetStatus:
    """Set the article status explicitly (e.g. archive it)."""
    status: ArticleStatus


@dataclass
class SetNextReadDate:
    """Reschedule the article without changing its status."""
    next_read_date: datetime


ArticleUpdate = AdvanceStatus | SetStatus | SetNextReadDate
