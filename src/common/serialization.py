"""Serialization utilities."""

from dataclasses import asdict
from datetime import datetime
from enum import Enum

from common.datetime import format_datetime


def _serialize_value(value):
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _serialize_value(v) for k, v in value.items()}
    return value


def serialize_dataclass(obj) -> dict:
    """Serialize a dataclass to dict, converting datetimes to RFC 3339 strings and enums to values."""
    return {key: _serialize_value(value) for key, value in asdict(obj).items()}
