"""Article identifier utilities."""

from datetime import datetime

from ulid import ULID


def generate_article_id() -> str:
    """Generate a new lexicographically sortable article ID (ULID)."""
    return str(ULID())


def is_valid_article_id(value: str) -> bool:
    """Return True if value is a well-formed ULID string."""
    try:
        ULID.from_str(value)
    except (TypeError, ValueError):
        return False
    return True


def article_id_timestamp(article_id: str) -> datetime:
    """Return the creation time encoded in an article ID."""
    return ULID.from_str(article_id).datetime
