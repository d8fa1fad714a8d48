"""Read the stored full text of an article."""

import logging

from articles.content import ContentStore
from articles.errors import NotFound
from articles.store import ArticleStore

logger = logging.getLogger(__name__)


def get_article_content(store: ArticleStore, content_store: ContentStore, article_id: str) -> tuple[str, str]:
    """Return (text, content_type) of the article's extracted text.

    Raises:
        NotFound: If the article is unknown or has no stored content.
    """
    record = store.get(article_id)
    if not record.content_location:
        raise NotFound(f"Article {article_id} has no stored content")

    text = content_store.read(record.content_location)
    content_type = "text/html" if record.content_location.endswith(".html") else "text/plain"
    logger.info("Read %d characters of content for article %s", len(text), article_id)
    return text, content_type
