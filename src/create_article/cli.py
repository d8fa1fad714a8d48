"""CLI for submitting articles."""

from __future__ import annotations

import argparse
import logging

from articles.content import get_content_store
from articles.errors import BinderError
from articles.parser import get_content_parser
from articles.store import get_article_store
from common.cli_helpers import print_json, setup_logging
from common.config import load_config
from common.serialization import serialize_dataclass
from create_article.create_article import create_article

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Submit article URLs to the reading list.")
    parser.add_argument("urls", nargs="+", help="Article URLs to ingest")
    parser.add_argument("--config", default=None, help="Config name (default: $BINDER_CONFIG or prod)")
    args = parser.parse_args()

    setup_logging()
    config = load_config(args.config)
    store = get_article_store(config)
    content_parser = get_content_parser(config.parser)
    content_store = get_content_store(config)

    failures = 0
    for url in args.urls:
        try:
            record = create_article(url, store, content_parser, content_store)
        except BinderError as exc:
            logger.error("Failed to ingest %s: %s", url, exc)
            failures += 1
            continue
        print_json(serialize_dataclass(record))

    if failures:
        raise SystemExit(f"{failures} of {len(args.urls)} articles failed")


if __name__ == "__main__":
    main()
