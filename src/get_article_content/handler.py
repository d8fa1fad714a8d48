"""Lambda entry point: GET /article/{ulid}/content."""

from articles.content import get_content_store
from articles.lambda_utils import get_article_id, lambda_handler
from articles.store import get_article_store
from common.config import get_config
from common.http import text_response
from get_article_content.get_article_content import get_article_content


@lambda_handler
def handler(event, context):
    article_id = get_article_id(event)
    config = get_config()
    text, content_type = get_article_content(
        get_article_store(config), get_content_store(config), article_id
    )
    return text_response(200, text, content_type=content_type)
