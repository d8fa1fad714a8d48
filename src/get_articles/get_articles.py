"""List articles due for review in a next-read-date window."""

import logging
from datetime import datetime
from typing import Optional

from articles.errors import InvalidRequest
from articles.models import ArticleRecord
from articles.store import ArticleStore

logger = logging.getLogger(__name__)


def list_articles(
    store: ArticleStore,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> list[ArticleRecord]:
    """Return articles whose next read date lies in the inclusive [start, end] window."""
    if start is not None and end is not None and start > end:
        raise InvalidRequest("start must not be after end")

    articles = store.list_by_next_read_date(start, end)
    logger.info(
        "Found %d articles due between %s and %s",
        len(articles),
        start.isoformat() if start else "-",
        end.isoformat() if end else "-",
    )
    return articles
