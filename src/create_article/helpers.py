"""Helper functions for create_article."""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import urlparse

from articles.errors import InvalidRequest, InvalidUrl
from articles.models import NO_AUTHOR, NO_TITLE


def validate_article_url(value: Optional[str]) -> str:
    '''Return the stripped URL if it is an absolute http(s) URL, else raise InvalidUrl.'''

    if value is None or not str(value).strip():
        raise InvalidUrl("Cannot process a blank URL")

    url = str(value).strip()
    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise InvalidUrl(f"Unable to parse URL: {url}") from exc

    if parsed.scheme not in ("http", "https") or not parsed.netloc or " " in url:
        raise InvalidUrl(f"Unable to parse URL: {url}")
    return url


def clean_field(value: Optional[str], default: str) -> str:
    '''Collapse whitespace, falling back to default when nothing is left.'''

    if not value:
        return default
    cleaned = " ".join(value.split())
    return cleaned or default


def clean_title(value: Optional[str]) -> str:
    return clean_field(value, NO_TITLE)


def clean_author(value: Optional[str]) -> str:
    return clean_field(value, NO_AUTHOR)


def parse_create_request(payload: Any) -> str:
    '''Extract the article URL from a create request body.

    Accepts the front-end shape {"articleUrl": ...} and the direct
    invocation shape {"article_url": ...}.
    '''

    if not isinstance(payload, dict):
        raise InvalidRequest("Request body must be a JSON object")
    for key in ("articleUrl", "article_url"):
        if key in payload:
            return payload[key]
    raise InvalidRequest("Request body must contain articleUrl")
