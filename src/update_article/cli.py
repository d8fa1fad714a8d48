"""CLI for reviewing, archiving and rescheduling articles."""

from __future__ import annotations

import argparse

from articles.models import AdvanceStatus, ArticleStatus, SetNextReadDate, SetStatus
from articles.store import get_article_store
from common.cli_helpers import parse_timestamp, print_json, setup_logging
from common.config import load_config
from common.serialization import serialize_dataclass
from update_article.update_article import update_article


def parse_update_article_args() -> argparse.Namespace:
    '''Parse CLI arguments for update_article.'''

    parser = argparse.ArgumentParser(description="Update an article's review state.")
    parser.add_argument("article_id", help="Article ULID")
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("--advance", action="store_true", help="Mark as read and move to the next status")
    action.add_argument("--archive", action="store_true", help="Move straight to Archive")
    action.add_argument("--status", choices=[s.value for s in ArticleStatus], help="Set the status (forward only)")
    action.add_argument("--next-read-date", type=lambda v: parse_timestamp(v, "next-read-date"))
    parser.add_argument("--config", default=None, help="Config name (default: $BINDER_CONFIG or prod)")
    return parser.parse_args()


def main() -> None:
    args = parse_update_article_args()
    setup_logging()

    if args.advance:
        update = AdvanceStatus()
    elif args.archive:
        update = SetStatus(ArticleStatus.ARCHIVE)
    elif args.status:
        update = SetStatus(ArticleStatus(args.status))
    else:
        update = SetNextReadDate(args.next_read_date)

    record = update_article(get_article_store(load_config(args.config)), args.article_id, update)
    print_json(serialize_dataclass(record))


if __name__ == "__main__":
    main()
