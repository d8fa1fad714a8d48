"""Apply review transitions to an article."""

import logging
from datetime import datetime

from articles.errors import InvalidRequest
from articles.models import AdvanceStatus, ArticleRecord, ArticleStatus, ArticleUpdate, SetNextReadDate, SetStatus
from articles.store import ArticleStore

logger = logging.getLogger(__name__)


def advance_status(store: ArticleStore, article_id: str) -> ArticleRecord:
    """Move an article to the next status and reschedule it from that status's interval.

    The write is conditional on the status read here, so a concurrent advance
    raises ConflictError instead of being lost.
    """
    current = store.get(article_id)
    new_status = current.status.next_status()
    logger.info("Advancing article %s from %s to %s", article_id, current.status.value, new_status.value)
    return store.update_status(article_id, new_status, expected_status=current.status)


def set_status(store: ArticleStore, article_id: str, status: ArticleStatus) -> ArticleRecord:
    """Set an article's status explicitly and reschedule from its interval.

    Only forward moves are allowed, so an archived article stays archived.
    """
    current = store.get(article_id)
    if not current.status.can_move_to(status):
        raise InvalidRequest(
            f"Cannot move article {article_id} from {current.status.value} back to {status.value}"
        )
    logger.info("Setting article %s from %s to %s", article_id, current.status.value, status.value)
    return store.update_status(article_id, status, expected_status=current.status)


def set_next_read_date(store: ArticleStore, article_id: str, next_read_date: datetime) -> ArticleRecord:
    """Reschedule an article without changing its status."""
    return store.update_next_read_date(article_id, next_read_date)


def update_article(store: ArticleStore, article_id: str, update: ArticleUpdate) -> ArticleRecord:
    """Apply one update request to an article.

    Raises:
        NotFound: If no article has that ID.
        InvalidRequest: If an explicit status would move the article backwards.
        ConflictError: If a status change raced with another update.
    """
    if isinstance(update, AdvanceStatus):
        return advance_status(store, article_id)
    if isinstance(update, SetStatus):
        return set_status(store, article_id, update.status)
    if isinstance(update, SetNextReadDate):
        return set_next_read_date(store, article_id, update.next_read_date)
    raise TypeError(f"Unsupported article update: {update!r}")
