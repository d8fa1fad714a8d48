"""Ingest a submitted URL as a new article."""

import logging
from datetime import datetime
from typing import Optional

from articles.content import ContentStore
from articles.models import ArticleRecord, ArticleStatus
from articles.parser import ContentParser
from articles.store import ArticleStore
from common.datetime import utc_now
from common.ids import generate_article_id
from create_article.helpers import clean_author, clean_title, validate_article_url

logger = logging.getLogger(__name__)


def create_article(
    article_url: str,
    store: ArticleStore,
    parser: ContentParser,
    content_store: ContentStore,
    now: Optional[datetime] = None,
) -> ArticleRecord:
    """Validate, parse and store a new article.

    Nothing is written to the article table unless every earlier step succeeds.

    Raises:
        InvalidUrl: If article_url is not an absolute http(s) URL.
        ExtractionFailed: If the content parser fails.
        StoreError: If the content upload or table write fails.
    """
    url = validate_article_url(article_url)
    parsed = parser.parse(url)

    article_id = generate_article_id()
    ingest_date = now or utc_now()

    title = clean_title(parsed.title)
    author = clean_author(parsed.byline)
    if parsed.title is None or parsed.byline is None:
        logger.warning("Incomplete metadata for %s: title=%r byline=%r", url, parsed.title, parsed.byline)

    content_location = None
    full_text = parsed.full_text
    if full_text:
        content_type = "text/html" if full_text is parsed.content else "text/plain"
        content_location = content_store.put(article_id, full_text, content_type, ingest_date)
    else:
        logger.warning("No content extracted for %s", url)

    record = ArticleRecord(
        id=article_id,
        title=title,
        author=author,
        source_url=url,
        content_location=content_location,
        summary=parsed.excerpt,
        ingest_date=ingest_date,
        status=ArticleStatus.NEW,
        next_read_date=ingest_date + ArticleStatus.NEW.repeat_duration(),
    )
    store.create(record)

    logger.info("Created article %s for %s", article_id, url)
    return record


def success_message(article_url: str) -> str:
    return f"Successfully stored {article_url} into DB"
