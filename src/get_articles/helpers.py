"""Helper functions for get_articles."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from articles.errors import InvalidRequest
from common.datetime import parse_datetime


def parse_window_bound(value: Optional[str], name: str) -> Optional[datetime]:
    '''Parse an optional RFC 3339 query parameter.'''

    if value is None or not value.strip():
        return None
    try:
        return parse_datetime(value)
    except ValueError as exc:
        raise InvalidRequest(f"{name} must be an RFC 3339 timestamp, got {value!r}") from exc
