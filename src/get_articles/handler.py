"""Lambda entry point: GET /articles?start=&end=."""

from articles.lambda_utils import lambda_handler
from articles.store import get_article_store
from common.config import get_config
from common.http import get_query_param, json_response
from common.serialization import serialize_dataclass
from get_articles.get_articles import list_articles
from get_articles.helpers import parse_window_bound


@lambda_handler
def handler(event, context):
    start = parse_window_bound(get_query_param(event, "start"), "start")
    end = parse_window_bound(get_query_param(event, "end"), "end")

    articles = list_articles(get_article_store(get_config()), start=start, end=end)
    return json_response(200, [serialize_dataclass(article) for article in articles])
