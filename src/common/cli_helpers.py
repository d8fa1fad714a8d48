"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime
from typing import Any

from common.datetime import parse_datetime


def setup_logging() -> None:
    """Configure standard logging format for CLI tools."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def parse_timestamp(value: str, field_name: str = "timestamp") -> datetime:
    """Parse an RFC 3339 timestamp for argparse arguments.

    Args:
        value: Timestamp string, e.g. 2024-01-01T12:00:00Z.
        field_name: Name of the field for error messages.

    Returns:
        Parsed UTC datetime.

    Raises:
        argparse.ArgumentTypeError: If the value is not a valid timestamp.
    """
    try:
        return parse_datetime(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"{field_name} must be an RFC 3339 timestamp") from exc


def print_json(data: Any) -> None:
    """Print data as indented JSON to stdout."""
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))
