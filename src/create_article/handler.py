"""Lambda entry point: POST /article."""

import logging

from articles.content import get_content_store
from articles.lambda_utils import lambda_handler, read_json_body
from articles.parser import get_content_parser
from articles.store import get_article_store
from common.config import get_config
from common.http import json_response
from create_article.create_article import create_article, success_message
from create_article.helpers import parse_create_request

logger = logging.getLogger(__name__)


@lambda_handler
def handler(event, context):
    # Direct invocations pass the request itself as the event.
    payload = read_json_body(event) if "body" in event else event
    article_url = parse_create_request(payload)
    logger.info("Processing url: %s", article_url)

    config = get_config()
    record = create_article(
        article_url,
        store=get_article_store(config),
        parser=get_content_parser(config.parser),
        content_store=get_content_store(config),
    )
    return json_response(200, {"message": success_message(record.source_url)})
