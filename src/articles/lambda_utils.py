"""Shared plumbing for the API Gateway Lambda handlers."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable

from articles.errors import BinderError, InvalidRequest, NotFound
from common.http import error_response, get_json_body, get_path_param, is_preflight, text_response
from common.ids import is_valid_article_id

logger = logging.getLogger(__name__)
# Lambda installs a root handler at WARNING; workflow loggers log at INFO.
logging.getLogger().setLevel(logging.INFO)

Handler = Callable[[dict[str, Any], Any], dict[str, Any]]


def lambda_handler(func: Handler) -> Handler:
    """Answer CORS preflights and map article errors to JSON error responses."""

    @functools.wraps(func)
    def wrapper(event: dict[str, Any], context: Any) -> dict[str, Any]:
        if is_preflight(event):
            return text_response(200)
        try:
            return func(event, context)
        except BinderError as exc:
            if exc.status_code >= 500:
                logger.error("%s failed: %s", func.__module__, exc)
            else:
                logger.warning("%s rejected request: %s", func.__module__, exc)
            return error_response(exc.status_code, str(exc))

    return wrapper


def read_json_body(event: dict[str, Any]) -> Any:
    """Decode the JSON request body, raising InvalidRequest on failure."""
    try:
        return get_json_body(event)
    except ValueError as exc:
        raise InvalidRequest(f"Invalid request body: {exc}") from exc


def get_article_id(event: dict[str, Any]) -> str:
    """Read the ``ulid`` path parameter. IDs that are not ULIDs cannot exist in the table."""
    article_id = get_path_param(event, "ulid")
    if not article_id or not is_valid_article_id(article_id):
        raise NotFound(f"Article {article_id} not found")
    return article_id
