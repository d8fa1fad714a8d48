"""Lambda entry point: PUT /article/{ulid}."""

import logging

from articles.lambda_utils import get_article_id, lambda_handler, read_json_body
from articles.store import get_article_store
from common.config import get_config
from common.http import text_response
from update_article.helpers import parse_update_request
from update_article.update_article import update_article

logger = logging.getLogger(__name__)


@lambda_handler
def handler(event, context):
    logger.info("In update article function handler")
    article_id = get_article_id(event)
    update = parse_update_request(read_json_body(event))
    logger.info("Got article update for %s: %s", article_id, update)

    update_article(get_article_store(get_config()), article_id, update)
    return text_response(200)
