"""CLI for listing articles due for review."""

from __future__ import annotations

import argparse
from datetime import timedelta

from articles.store import get_article_store
from common.cli_helpers import parse_timestamp, print_json, setup_logging
from common.config import load_config
from common.datetime import utc_now
from common.serialization import serialize_dataclass
from get_articles.get_articles import list_articles


def main() -> None:
    parser = argparse.ArgumentParser(description="List articles by next read date.")
    parser.add_argument("--start", type=lambda v: parse_timestamp(v, "start"), default=None)
    parser.add_argument("--end", type=lambda v: parse_timestamp(v, "end"), default=None)
    parser.add_argument(
        "--due-this-week",
        action="store_true",
        help="Shortcut for --start now --end now+1 week.",
    )
    parser.add_argument("--config", default=None, help="Config name (default: $BINDER_CONFIG or prod)")
    args = parser.parse_args()

    setup_logging()
    start, end = args.start, args.end
    if args.due_this_week:
        start = utc_now()
        end = start + timedelta(weeks=1)

    articles = list_articles(get_article_store(load_config(args.config)), start=start, end=end)
    print_json([serialize_dataclass(article) for article in articles])


if __name__ == "__main__":
    main()
