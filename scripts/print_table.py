"""Print rows from the article table."""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv


def _format_value(value: object, max_len: int = 100) -> str:
    if isinstance(value, str) and len(value) > max_len:
        return f"{value[:max_len]}..."
    return str(value) if value is not None else "None"


def main() -> None:
    parser = argparse.ArgumentParser(description="Print rows from the article table.")
    parser.add_argument("--config", default=None, help="Config name (default: $BINDER_CONFIG or prod)")
    parser.add_argument("--limit", type=int, default=50, help="Max rows to print")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    logger = logging.getLogger(__name__)

    load_dotenv()

    from articles.store import get_article_store
    from common.config import load_config
    from common.serialization import serialize_dataclass

    records = get_article_store(load_config(args.config)).list_by_next_read_date()

    logger.info("Fetched %d rows", len(records))
    for record in records[: args.limit]:
        formatted = {key: _format_value(value) for key, value in serialize_dataclass(record).items()}
        for key in sorted(formatted.keys()):
            print(f"{key}: {formatted[key]}")
        print("-" * 40)


if __name__ == "__main__":
    main()
