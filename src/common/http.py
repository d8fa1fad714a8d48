"""Helpers for API Gateway proxy events and responses."""

from __future__ import annotations

import base64
import json
from typing import Any

CORS_HEADERS = {
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "OPTIONS,POST,GET,PUT",
}


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    """Build a proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": {**CORS_HEADERS, "Content-Type": "application/json"},
        "body": json.dumps(body, ensure_ascii=False),
    }


def text_response(status_code: int, body: str = "", content_type: str = "text/plain") -> dict[str, Any]:
    """Build a proxy response with a plain body."""
    return {
        "statusCode": status_code,
        "headers": {**CORS_HEADERS, "Content-Type": f"{content_type}; charset=utf-8"},
        "body": body,
    }


def error_response(status_code: int, message: str) -> dict[str, Any]:
    return json_response(status_code, {"error": message})


def get_body(event: dict[str, Any]) -> str | None:
    """Return the raw request body, decoding base64 if API Gateway encoded it."""
    body = event.get("body")
    if body is None:
        return None
    if event.get("isBase64Encoded"):
        body = base64.b64decode(body).decode("utf-8")
    return body


def get_json_body(event: dict[str, Any]) -> Any:
    """Decode the JSON request body.

    Raises:
        ValueError: If the body is missing or not valid JSON.
    """
    body = get_body(event)
    if body is None or not body.strip():
        raise ValueError("Request body is empty")
    return json.loads(body)


def get_query_param(event: dict[str, Any], name: str) -> str | None:
    params = event.get("queryStringParameters") or {}
    value = params.get(name)
    return value or None


def get_path_param(event: dict[str, Any], name: str) -> str | None:
    params = event.get("pathParameters") or {}
    return params.get(name)


def is_preflight(event: dict[str, Any]) -> bool:
    method = event.get("httpMethod") or event.get("requestContext", {}).get("http", {}).get("method")
    return method == "OPTIONS"
