"""Datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_datetime(value) -> datetime:
    """Parse datetime from ISO string or return as-is if already datetime.

    Naive values are assumed to be UTC. The result is always converted to UTC.
    """
    if value is None:
        return utc_now()
    if not isinstance(value, datetime):
        value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_datetime(value: datetime) -> str:
    """Format a datetime as fixed-width RFC 3339 UTC with millisecond precision.

    The fixed width keeps lexicographic order equal to chronological order,
    which keeps stored next-read-dates sortable as plain strings.
    """
    value = parse_datetime(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
