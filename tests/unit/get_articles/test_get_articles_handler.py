"""Tests for the get_articles Lambda handler and its helpers."""

import json
from datetime import timedelta, timezone

import pytest

from articles.errors import InvalidRequest
from articles.local_store import LocalArticleStore
from common.datetime import format_datetime
from conftest import NOW, make_record
from get_articles.handler import handler
from get_articles.helpers import parse_window_bound


def get_event(**params) -> dict:
    return {"httpMethod": "GET", "queryStringParameters": params or None}


@pytest.fixture
def seeded(local_config, tmp_path):
    store = LocalArticleStore(tmp_path / "articles.json")
    store.create(make_record("01HKZ0000000000000000000AA", next_read_date=NOW, title="First"))
    store.create(make_record("01HKZ0000000000000000000BB", next_read_date=NOW + timedelta(weeks=2), title="Second"))
    return store


class TestParseWindowBound:
    def test_none(self) -> None:
        assert parse_window_bound(None, "start") is None

    def test_rfc3339_with_millis(self) -> None:
        result = parse_window_bound("2024-01-01T12:00:00.000Z", "start")
        assert result == NOW
        assert result.tzinfo == timezone.utc

    def test_invalid_raises(self) -> None:
        with pytest.raises(InvalidRequest):
            parse_window_bound("yesterday", "start")


class TestGetArticlesHandler:
    def test_lists_all_without_params(self, seeded) -> None:
        response = handler(get_event(), None)

        assert response["statusCode"] == 200
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"
        body = json.loads(response["body"])
        assert [a["title"] for a in body] == ["First", "Second"]
        assert body[0]["status"] == "New"
        assert body[0]["next_read_date"] == "2024-01-01T12:00:00.000Z"

    def test_window_filters(self, seeded) -> None:
        response = handler(
            get_event(start=format_datetime(NOW), end=format_datetime(NOW + timedelta(weeks=1))), None
        )
        assert [a["title"] for a in json.loads(response["body"])] == ["First"]

    def test_empty_list(self, local_config) -> None:
        response = handler(get_event(), None)
        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == []

    def test_bad_timestamp_returns_400(self, local_config) -> None:
        response = handler(get_event(start="not-a-date"), None)
        assert response["statusCode"] == 400

    def test_malformed_stored_item_returns_500_with_cors(self, local_config, tmp_path) -> None:
        bad_item = {"ulid": "01HKZ0000000000000000000AA", "next_read_date": "soon"}
        (tmp_path / "articles.json").write_text(json.dumps({bad_item["ulid"]: bad_item}))

        response = handler(get_event(), None)

        assert response["statusCode"] == 500
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"
