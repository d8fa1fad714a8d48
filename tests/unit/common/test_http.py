"""Tests for common.http module."""

import base64
import json

import pytest

from common.http import (
    CORS_HEADERS,
    get_json_body,
    get_path_param,
    get_query_param,
    is_preflight,
    json_response,
    text_response,
)


class TestResponses:
    def test_json_response_has_cors_headers(self) -> None:
        response = json_response(200, {"message": "ok"})
        assert response["statusCode"] == 200
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"
        assert response["headers"]["Content-Type"] == "application/json"
        assert json.loads(response["body"]) == {"message": "ok"}

    def test_text_response_defaults_to_empty_body(self) -> None:
        response = text_response(200)
        assert response["body"] == ""
        for key, value in CORS_HEADERS.items():
            assert response["headers"][key] == value


class TestRequestParsing:
    def test_json_body(self) -> None:
        assert get_json_body({"body": '{"a": 1}'}) == {"a": 1}

    def test_base64_body(self) -> None:
        encoded = base64.b64encode(b'"Advance"').decode()
        assert get_json_body({"body": encoded, "isBase64Encoded": True}) == "Advance"

    def test_empty_body_raises(self) -> None:
        with pytest.raises(ValueError):
            get_json_body({"body": ""})

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(ValueError):
            get_json_body({"body": "{not json"})

    def test_query_param_missing_params(self) -> None:
        assert get_query_param({"queryStringParameters": None}, "start") is None

    def test_query_param_blank_is_none(self) -> None:
        assert get_query_param({"queryStringParameters": {"start": ""}}, "start") is None

    def test_path_param(self) -> None:
        assert get_path_param({"pathParameters": {"ulid": "abc"}}, "ulid") == "abc"

    def test_preflight_rest_api(self) -> None:
        assert is_preflight({"httpMethod": "OPTIONS"})

    def test_preflight_http_api(self) -> None:
        assert is_preflight({"requestContext": {"http": {"method": "OPTIONS"}}})

    def test_not_preflight(self) -> None:
        assert not is_preflight({"httpMethod": "GET"})
